from extlint.config.rules import ImportExtensionsRuleConfig
from extlint.config.settings import ResolverSettings

DEFAULT_CONFIG = {
    "languages": {
        "javascript": {"extensions": [".js", ".mjs", ".cjs", ".jsx"]},
        "typescript": {"extensions": [".ts", ".mts", ".cts"]},
        "tsx": {"extensions": [".tsx"]},
    },
    "ignore_paths": ["node_modules/", "bower_components/", "dist/", "build/", "coverage/", ".git/"],
    "settings": ResolverSettings.default().model_dump(),
    "rules": {
        "import_extensions": ImportExtensionsRuleConfig.default().model_dump(),
    },
}
