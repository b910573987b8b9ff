from .container import DIContainer, build_container

__all__ = ["DIContainer", "build_container"]
