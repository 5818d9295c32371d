import os
import sys
import json
import logging

from scrollback.console import ConsoleConfig

log = logging.getLogger(__name__)

# Built-in safe defaults (fallbacks)
MAX_LINES = 10
COLLAPSE = True
TIMESTAMPS = False
LOCKED = False
REFRESH_INTERVAL_MS = 100

CONFIG_FILENAME = "console_config.json"
APP_DIRNAME = "ScrollbackConsole"

# ---------- Runtime location helpers ----------

def _exe_dir() -> str:
    # Directory containing the executable (or the repo root in source runs)
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

def _bundle_dir() -> str | None:
    # PyInstaller sets sys._MEIPASS to the bundle's content directory
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return getattr(sys, "_MEIPASS", None)
    return None

# ---------- console_config.json helpers ----------

def console_config_candidates() -> list[str]:
    """
    Return potential locations for console_config.json (read paths only).
    """
    cands = []
    meipass = _bundle_dir()
    if meipass:
        cands.append(os.path.join(meipass, "config", CONFIG_FILENAME))  # bundled default
    cands.append(os.path.join(_exe_dir(), "config", CONFIG_FILENAME))   # next to exe / repo
    cands.append(os.path.join(os.getcwd(), "config", CONFIG_FILENAME))  # CWD
    return cands

def user_config_dir() -> str:
    appdata = os.environ.get("APPDATA") or os.path.expanduser("~")
    return os.path.join(appdata, APP_DIRNAME)

def user_config_path() -> str:
    return os.path.join(user_config_dir(), CONFIG_FILENAME)

def current_console_config_path() -> str | None:
    for p in console_config_candidates():
        if os.path.exists(p):
            return p
    return None

def write_console_config(cfg: ConsoleConfig | dict) -> str:
    # Persist per-user config (safe without admin rights)
    data = cfg if isinstance(cfg, dict) else {
        "MAX_LINES": cfg.max_lines,
        "COLLAPSE": cfg.collapse,
        "TIMESTAMPS": cfg.timestamps,
        "LOCKED": cfg.locked,
    }
    out_dir = user_config_dir()
    os.makedirs(out_dir, exist_ok=True)
    out_path = os.path.join(out_dir, CONFIG_FILENAME)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    return out_path

# ---------- Config loading ----------

def _load_json(p: str) -> dict:
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception as e:
        log.debug("ignoring unreadable config %s: %s", p, e)
        return {}
    return data if isinstance(data, dict) else {}

def _as_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s in ("1", "true", "yes", "on"):
            return True
        if s in ("0", "false", "no", "off"):
            return False
    return default

def _as_lines(value, default: int) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return default

def _normalize_cfg(cfg: dict) -> dict:
    out = dict(cfg or {})
    out["MAX_LINES"] = _as_lines(out.get("MAX_LINES", MAX_LINES), MAX_LINES)
    out["COLLAPSE"] = _as_bool(out.get("COLLAPSE", COLLAPSE), COLLAPSE)
    out["TIMESTAMPS"] = _as_bool(out.get("TIMESTAMPS", TIMESTAMPS), TIMESTAMPS)
    out["LOCKED"] = _as_bool(out.get("LOCKED", LOCKED), LOCKED)
    out["REFRESH_INTERVAL_MS"] = _as_lines(out.get("REFRESH_INTERVAL_MS", REFRESH_INTERVAL_MS), REFRESH_INTERVAL_MS)
    return out

def load_runtime_config(paths: list[str] | None = None) -> dict:
    """
    Merge the machine default (first existing candidate) with the per-user override.
    With explicit paths, later files override earlier ones.
    """
    if paths is None:
        paths = []
        machine = current_console_config_path()
        if machine:
            paths.append(machine)
        paths.append(user_config_path())
    cfg: dict = {}
    for p in paths:
        if os.path.exists(p):
            cfg.update(_load_json(p))
    return _normalize_cfg(cfg)

def load_console_config(paths: list[str] | None = None) -> ConsoleConfig:
    cfg = load_runtime_config(paths)
    return ConsoleConfig(
        max_lines=cfg["MAX_LINES"],
        collapse=cfg["COLLAPSE"],
        timestamps=cfg["TIMESTAMPS"],
        locked=cfg["LOCKED"],
    )

def load_refresh_interval(paths: list[str] | None = None) -> int:
    """Interval (ms) of the runtime clock that feeds the window's watch entries."""
    return load_runtime_config(paths)["REFRESH_INTERVAL_MS"]
