"""Top-level config keys, defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = ".lintconf.yml"

KEY_CACHE_PATH: str = "cache_path"
KEY_DISABLED_RULES: str = "disabled_rules"
KEY_ENABLED_RULES: str = "enabled_rules"  # deprecated in favor of opt_in_rules
KEY_EXCLUDED: str = "excluded"
KEY_INCLUDED: str = "included"
KEY_OPT_IN_RULES: str = "opt_in_rules"
KEY_REPORTER: str = "reporter"
KEY_LINT_VERSION: str = "lint_version"
KEY_USE_NESTED_CONFIGS: str = "use_nested_configs"  # deprecated, ignored
KEY_WARNING_THRESHOLD: str = "warning_threshold"
KEY_WHITELIST_RULES: str = "whitelist_rules"
KEY_INDENTATION: str = "indentation"
KEY_ANALYZER_RULES: str = "analyzer_rules"
KEY_CHILD_CONFIG: str = "child_config"
KEY_PARENT_CONFIG: str = "parent_config"
KEY_REMOTE_TIMEOUT: str = "remote_timeout"
KEY_REMOTE_TIMEOUT_IF_CACHED: str = "remote_timeout_if_cached"

GLOBAL_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        KEY_CACHE_PATH,
        KEY_DISABLED_RULES,
        KEY_ENABLED_RULES,
        KEY_EXCLUDED,
        KEY_INCLUDED,
        KEY_OPT_IN_RULES,
        KEY_REPORTER,
        KEY_LINT_VERSION,
        KEY_USE_NESTED_CONFIGS,
        KEY_WARNING_THRESHOLD,
        KEY_WHITELIST_RULES,
        KEY_INDENTATION,
        KEY_ANALYZER_RULES,
        KEY_CHILD_CONFIG,
        KEY_PARENT_CONFIG,
        KEY_REMOTE_TIMEOUT,
        KEY_REMOTE_TIMEOUT_IF_CACHED,
    }
)

DEFAULT_REPORTER: str = "xcode"
DEFAULT_INDENTATION_SPACES: int = 4
INDENTATION_TABS: str = "tabs"
