from extlint.config.extensions import Modifier, PolicyConfig


def modifier_for(config: PolicyConfig, extension: str) -> Modifier:
    return config.pattern.get(extension, config.default_config)


def is_required(config: PolicyConfig, extension: str, is_package_main: bool) -> bool:
    # ignorePackages only ever softens the required direction.
    return modifier_for(config, extension) == Modifier.ALWAYS and (
        not config.ignore_packages or not is_package_main
    )


def is_forbidden(config: PolicyConfig, extension: str) -> bool:
    return modifier_for(config, extension) == Modifier.NEVER
