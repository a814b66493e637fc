import json
import os
from datetime import datetime

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "max_steps": 1_000_000,
    "trace": True,
    "trace_format": "text",
    "log_traces": False,
    "output_directory": "logs/",
    "log_file_prefix": "adder_",
    "default_operands": ["1010011011", "1011"],
    "sweep": {
        "max_bits": 4,
        "random_cases": 200,
        "random_bits": 16,
        "seed": 0,
        "batch_size": 256
    }
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "trace": bool,
    "trace_format": str,
    "log_traces": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "default_operands": list,
    "sweep": dict
}

TRACE_FORMATS = ("text", "caret")
SWEEP_KEYS = ("max_bits", "random_cases", "random_bits", "seed", "batch_size")


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; keep flags and counts apart
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] < 0:
        raise ValueError("max_steps must be >= 0 (0 disables the step ceiling).")
    if config["trace_format"] not in TRACE_FORMATS:
        raise ValueError(f"trace_format must be one of {TRACE_FORMATS}, got '{config['trace_format']}'.")
    if len(config["default_operands"]) != 2:
        raise ValueError("default_operands must hold exactly two binary strings.")

    # Special check inside sweep
    sweep = config["sweep"]
    if not all(k in sweep for k in SWEEP_KEYS):
        raise ValueError(f"Sweep settings must contain {', '.join(repr(k) for k in SWEEP_KEYS)}.")
    for k in SWEEP_KEYS:
        if not isinstance(sweep[k], int) or isinstance(sweep[k], bool) or sweep[k] < 0:
            raise ValueError(f"Sweep setting '{k}' must be a non-negative integer.")
    if sweep["batch_size"] == 0:
        raise ValueError("Sweep setting 'batch_size' must be positive.")


def step_ceiling(config):
    """Translate the configured max_steps into the engine's argument (None = unbounded)."""
    return config["max_steps"] or None


def load_config(path=DEFAULT_CONFIG_PATH, verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r") as f:
        user_config = json.load(f)

    if not isinstance(user_config, dict):
        raise ValueError(f"Configuration file {path} must hold a JSON object, got {type(user_config).__name__}.")

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config["sweep"] = dict(DEFAULT_CONFIG["sweep"])
    sweep_overrides = user_config.get("sweep")
    config.update(user_config)
    if isinstance(sweep_overrides, dict):
        config["sweep"] = {**DEFAULT_CONFIG["sweep"], **sweep_overrides}

    # Validate schema
    validate_config(config)

    # Validate output directory
    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config


def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
