from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    work_dir: Path = Path(".")
    ids_dir_name: str = "ids"
    records_dir_name: str = "old"
    output_dir_name: str = "new"
    new_ids_file_name: str = "new_ids.txt"
    new_records_file_name: str = "new_events.txt"

    match_mode: str = "literal"
    max_workers: int | None = None

    clean_output: bool = False
    show_progress: bool = True

    @property
    def ids_dir(self) -> Path:
        return self.work_dir / self.ids_dir_name

    @property
    def records_dir(self) -> Path:
        return self.work_dir / self.records_dir_name

    @property
    def output_dir(self) -> Path:
        return self.work_dir / self.output_dir_name

    @property
    def new_ids_path(self) -> Path:
        return self.output_dir / self.new_ids_file_name

    @property
    def new_records_path(self) -> Path:
        return self.output_dir / self.new_records_file_name
