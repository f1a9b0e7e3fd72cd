# -*- coding: utf-8 -*-


class ConfigurationError(ValueError):
    """
    Raised when a component is built from an invalid config,
    the instance is never usable afterwards
    """
    pass
