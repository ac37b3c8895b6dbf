from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_FILE_NAME = "_data.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TPLCOMPILE_", case_sensitive=False)

    root_dir: Path = Field(default_factory=Path.cwd)
    source_patterns: Path = Path("source/_patterns")
    public_patterns: Path = Path("public/patterns")
    backend_dir: Path = Path("backend")
    data_dir: Path = Path("source/_data")
    rc_file: str = ".jsbeautifyrc"
    encoding: str = "utf-8"

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.root_dir / path

    @property
    def patterns_src(self) -> Path:
        return self._resolve(self.source_patterns)

    @property
    def patterns_pub(self) -> Path:
        return self._resolve(self.public_patterns)

    @property
    def backend(self) -> Path:
        return self._resolve(self.backend_dir)

    @property
    def data_file(self) -> Path:
        return self._resolve(self.data_dir) / DATA_FILE_NAME

    @property
    def project_rc(self) -> Path:
        return self.root_dir / self.rc_file
