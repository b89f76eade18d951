"""Module for reading the config preferences.

   Preferences are primarily read from the corresponding system environment
   variables, and from the config.yml config file as a fallback.
   Note that the type of the config values is enforced by the YAML schema.
"""

from ast import literal_eval
import inspect
import os

from strictyaml import as_document, load, Bool, Float, Int, Map, Str

from standby.errors import ConfigError


class PredicatedInt(Int):
    """StrictYAML Int validator, with optional predicates."""
    def __init__(self, predicates=None):
        self.predicates = predicates if predicates is not None else []

    def validate_scalar(self, chunk):
        val = super().validate_scalar(chunk)
        for pred in self.predicates:
            if not pred(val):
                chunk.expecting_but_found(str(inspect.getsourcelines(pred)[0]))
        return val


# The schema used for StrictYAML parsing.
YAML_CFG_SCHEMA = {
    "STANDBY_SECRET_TOKEN": Str(),
    "STANDBY_APP_ID": PredicatedInt([lambda x: x >= 0]),
    "STANDBY_GUILD_ID": PredicatedInt([lambda x: x >= 0]),
    "STANDBY_CHANNEL_ID": PredicatedInt([lambda x: x >= 0]),
    "STANDBY_ADMIN_ROLE_ID": PredicatedInt([lambda x: x >= 0]),
    "STANDBY_ROLE_ID": PredicatedInt([lambda x: x >= 0]),
    "STANDBY_QUEUE_SIZE": PredicatedInt([lambda x: x > 0]),
    "STANDBY_WAITLIST_ENABLED": Bool(),
    "STANDBY_HARD_CAP": Bool(),
    "STANDBY_TOGGLE_COOLDOWN_SECS": Float(),
    "STANDBY_EPHEMERAL_MESSAGES": Bool(),
    "STANDBY_PRESENCE_TEXT": Str(),
    "STANDBY_LOG_LEVEL": Str(),
}

# Keys that have no usable default and must be provided by the operator.
REQUIRED_KEYS = (
    "STANDBY_SECRET_TOKEN",
    "STANDBY_APP_ID",
    "STANDBY_GUILD_ID",
    "STANDBY_CHANNEL_ID",
)

# Default config, shipped inside the package.
DEFAULT_CFG_PATH = os.path.join(os.path.dirname(os.path.realpath(__file__)),
                                "cfg", "config.yml")
CFG_PATH = os.environ.get("STANDBY_CONFIG_PATH") or DEFAULT_CFG_PATH
assert os.path.isfile(CFG_PATH), f"Config file not found: {CFG_PATH}"
with open(file=CFG_PATH, mode="r", encoding="utf-8") as f_config:
    CFG = load(f_config.read(), Map(YAML_CFG_SCHEMA))
assert CFG is not None


def cfg(key):
    """Returns a bot config value from environment variable or config file,
       in that order. If using an env var, its format has to match the type
       determined by the config values' StrictYAML schema.
    """
    assert isinstance(key, str)
    env_value = os.environ.get(key)
    if env_value:
        expected_ret_type = YAML_CFG_SCHEMA[key]
        if isinstance(expected_ret_type, Str):
            value = env_value
        else:
            try:
                value = literal_eval(env_value)
            except (ValueError, SyntaxError):
                # Let the schema decide, eg. "yes" for a Bool.
                value = env_value
        # Small placeholder schema used for validating just this type.
        # We don't want to use the main schema because then we'd need
        # to populate it entirely, even though we're only interested
        # in returning this particular var.
        mini_schema = {key: expected_ret_type}
        return as_document({key: value}, Map(mini_schema))[key].value
    return CFG[key].value


def validate():
    """Raises a ConfigError listing every required value that is unset."""
    missing = [key for key in REQUIRED_KEYS if not cfg(key)]
    if missing:
        raise ConfigError("Missing required config value(s): "
                          f"{', '.join(missing)}")
