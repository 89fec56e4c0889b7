from decimal import Decimal
from pathlib import Path
from typing import Literal, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- Data root ----
    data_root: Path = Path("data")

    # ----- Files (default to data_root/<name> unless set explicitly) -----
    inventory_snapshot: Optional[Path] = None
    students_input: Optional[Path] = None
    report_output: Optional[Path] = None

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- finance ----
    currency_symbol: str = "$"
    opening_balance: Decimal = Decimal("1000")

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_DATA_ROOT, APP_LOG_LEVEL, etc.
        extra = "ignore"
    )

    @model_validator(mode="after")
    def _derive_file_paths(self) -> "Settings":
        if self.inventory_snapshot is None:
            self.inventory_snapshot = self.data_root / "inventory.json"
        if self.students_input is None:
            self.students_input = self.data_root / "students.txt"
        if self.report_output is None:
            self.report_output = self.data_root / "report.txt"
        return self


def get_settings() -> Settings:
    """Accessor kept as a function so tests can patch it."""
    return Settings()
