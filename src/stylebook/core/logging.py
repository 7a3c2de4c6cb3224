# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Logging setup for stylebook (stdlib logging).
#
# Notes:
#	- No Tk dependencies; safe to call before the window exists.
#	- init_logging() is idempotent: same settings => no new handlers.
#
#	Supported cfg keys (dotted form wins over the flat form):
#		"logging.level"		/ "log_level"		(default: "INFO")
#		"logging.console"	/ "log_console"		(default: True)
#		"logging.file"		/ "log_file"		(default: None)
#		"logging.file_mode"	/ "log_file_mode"	(default: "a")
#		"logging.reset_root"	/ "log_reset_root"	(default: True)
#		"logging.format"	/ "log_format"
#		"logging.datefmt"	/ "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Resolve settings into LogSettings
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import logging


APP_LOGGER_BASE = "stylebook.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class LogSettings:
	"""
	Resolved logging settings. Doubles as the idempotency signature.
	"""
	level: int = logging.INFO
	console: bool = True
	file: str | None = None
	file_mode: str = "a"
	reset_root: bool = True
	fmt: str = DEFAULT_FORMAT
	datefmt: str = DEFAULT_DATEFMT

	@classmethod
	def from_cfg(cls, cfg: Any | None) -> "LogSettings":
		log_file = _lookup(cfg, "file", None)

		return cls(
			level=_coerce_level(_lookup(cfg, "level", "INFO")),
			console=bool(_lookup(cfg, "console", True)),
			file=str(log_file) if log_file else None,
			file_mode=_coerce_file_mode(_lookup(cfg, "file_mode", "a")),
			reset_root=bool(_lookup(cfg, "reset_root", True)),
			fmt=str(_lookup(cfg, "format", DEFAULT_FORMAT)),
			datefmt=str(_lookup(cfg, "datefmt", DEFAULT_DATEFMT)),
		)


# Last applied settings (None until init_logging runs)
_APPLIED: LogSettings | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()          -> stylebook.app
		get_app_logger("render")  -> stylebook.app.render
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{component}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> LogSettings:
	"""
	Configure the root logger from cfg and return the applied settings.

	Args:
		cfg:
			Anything with get(key, default) (AppConfig, dict) or None.
	"""
	global _APPLIED

	settings = LogSettings.from_cfg(cfg)
	if _APPLIED == settings:
		return settings

	_configure_root_logger(settings)
	_APPLIED = settings
	return settings


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _lookup(cfg: Any | None, key: str, default: Any) -> Any:
	"""
	Look up "logging.<key>" first, then "log_<key>".
	"""
	if cfg is None:
		return default

	for full_key in (f"logging.{key}", f"log_{key}"):
		value = cfg.get(full_key, None)
		if value is not None:
			return value
	return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only append or truncate
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _configure_root_logger(settings: LogSettings) -> None:
	root = logging.getLogger()
	root.setLevel(settings.level)

	if settings.reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=settings.fmt, datefmt=settings.datefmt)

	handlers: list[logging.Handler] = []
	if settings.console:
		handlers.append(logging.StreamHandler())

	if settings.file:
		Path(settings.file).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
		handlers.append(logging.FileHandler(settings.file, mode=settings.file_mode, encoding="utf-8"))

	for h in handlers:
		h.setLevel(settings.level)
		h.setFormatter(formatter)
		root.addHandler(h)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _APPLIED
	_APPLIED = None
