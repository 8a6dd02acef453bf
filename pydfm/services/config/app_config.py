from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from pydfm.domain.interfaces import IConfigService
from pydfm.services.config.ini_config_service import IniConfigService
from pydfm.services.document_controller import ControllerOptions
from pydfm.utils.constants import (
    APP_TITLE,
    DEFAULT_EXT,
    DEFAULT_FILTER,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SAVE_PROMPT,
    DEFAULT_SAVE_TITLE,
)
from pydfm.utils.filters import to_qt_filter

log = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    # app_config.py -> pydfm/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """
    Typed view over an IConfigService.

    Recognised keys::

        [app]      title, version
        [document] default_ext, filter, save_prompt, save_title
        [logging]  level
    """

    ini: IConfigService
    project_root: Path

    def document_options(self) -> ControllerOptions:
        ext = (self.ini.get("document", "default_ext", DEFAULT_EXT) or DEFAULT_EXT).strip()
        return ControllerOptions(
            default_ext=ext.lstrip("."),
            filter=self._document_filter(),
            save_prompt=self.ini.get("document", "save_prompt", DEFAULT_SAVE_PROMPT)
            or DEFAULT_SAVE_PROMPT,
            save_title=self.ini.get("document", "save_title", DEFAULT_SAVE_TITLE)
            or DEFAULT_SAVE_TITLE,
        )

    def _document_filter(self) -> str:
        raw = self.ini.get("document", "filter", DEFAULT_FILTER) or DEFAULT_FILTER
        try:
            to_qt_filter(raw)
        except ValueError as e:
            log.warning("Ignoring [document] filter, using default: %s", e)
            return DEFAULT_FILTER
        return raw

    def app_title(self) -> str:
        return (self.ini.get("app", "title", APP_TITLE) or APP_TITLE).strip() or APP_TITLE

    def log_level(self) -> str:
        return (self.ini.get("logging", "level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()

    def get_version(self) -> str:
        raw = (self.ini.get("app", "version", "") or "").strip()
        m = _VERSION_RE.match(raw)
        if m:
            return m.group(1)
        return raw or "0.0.0"


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
