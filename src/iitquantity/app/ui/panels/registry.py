from __future__ import annotations

from PySide6.QtWidgets import QWidget

from iitquantity.app.ui.panels.base import BasePanel

_REGISTRY: dict[str, type[BasePanel]] = {}


def register_panel(cls: type[BasePanel]) -> type[BasePanel]:
    """Class decorator to register a panel by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def create_panel(key: str, parent: QWidget | None = None) -> BasePanel:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No panel registered for key '{key}'")
    return cls(parent)


def panel_title(key: str) -> str:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No panel registered for key '{key}'")
    return cls.TITLE


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
