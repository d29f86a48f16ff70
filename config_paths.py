import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "chartgrid")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
DEFAULT_COLUMN_WIDTH_DEFAULT = 150
HISTORY_MAX_DEPTH_DEFAULT = 0  # 0 keeps every batch
MODIFIER_CONVENTION_DEFAULT = "auto"
MODIFIER_CONVENTIONS = {"auto", "ctrl", "cmd"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def default_config():
    return {
        "DEFAULT_COLUMN_WIDTH": DEFAULT_COLUMN_WIDTH_DEFAULT,
        "HISTORY_MAX_DEPTH": HISTORY_MAX_DEPTH_DEFAULT,
        "MODIFIER_CONVENTION": MODIFIER_CONVENTION_DEFAULT,
    }


def load_config():
    cfg = default_config()

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    table = data.get("table")
    if isinstance(table, dict):
        width = table.get("default_column_width")
        if isinstance(width, int) and not isinstance(width, bool) and width > 0:
            cfg["DEFAULT_COLUMN_WIDTH"] = width

    history = data.get("history")
    if isinstance(history, dict):
        depth = history.get("max_depth")
        if isinstance(depth, int) and not isinstance(depth, bool) and depth >= 0:
            cfg["HISTORY_MAX_DEPTH"] = depth

    keys = data.get("keys")
    if isinstance(keys, dict):
        modifier = keys.get("modifier")
        if isinstance(modifier, str) and modifier.lower() in MODIFIER_CONVENTIONS:
            cfg["MODIFIER_CONVENTION"] = modifier.lower()

    return cfg
