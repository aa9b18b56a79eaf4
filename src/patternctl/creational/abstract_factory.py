"""GUI abstract factory: one factory per OS family, three widgets each.

Switching the factory switches the look of all three widgets at once.
INVARIANT: every widget produced by one factory reports that factory's
``family``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from patternctl.domain.types import OSType

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Widget capabilities
# ---------------------------------------------------------------------------


class Widget(ABC):
    """Anything a GUI factory produces."""

    family: ClassVar[OSType]

    @abstractmethod
    def render(self) -> None:
        """Draw the widget (logged)."""
        ...


class Input(Widget):
    """Text input capability."""


class Button(Widget):
    """Push button capability."""


class Checkbox(Widget):
    """Checkbox capability."""


# --- Windows family ---


class WindowsInput(Input):
    family: ClassVar[OSType] = OSType.WINDOWS

    def render(self) -> None:
        logger.info("Rendering Windows Input.")


class WindowsButton(Button):
    family: ClassVar[OSType] = OSType.WINDOWS

    def render(self) -> None:
        logger.info("Rendering Windows Button.")


class WindowsCheckbox(Checkbox):
    family: ClassVar[OSType] = OSType.WINDOWS

    def render(self) -> None:
        logger.info("Rendering Windows Checkbox.")


# --- MacOS family ---


class MacOSInput(Input):
    family: ClassVar[OSType] = OSType.MACOS

    def render(self) -> None:
        logger.info("Rendering MacOS Input.")


class MacOSButton(Button):
    family: ClassVar[OSType] = OSType.MACOS

    def render(self) -> None:
        logger.info("Rendering MacOS Button.")


class MacOSCheckbox(Checkbox):
    family: ClassVar[OSType] = OSType.MACOS

    def render(self) -> None:
        logger.info("Rendering MacOS Checkbox.")


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class GUIFactory(ABC):
    """Produces a consistent family of widgets."""

    family: ClassVar[OSType]

    @abstractmethod
    def create_input(self) -> Input: ...

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...


class WindowsGUIFactory(GUIFactory):
    family: ClassVar[OSType] = OSType.WINDOWS

    def create_input(self) -> Input:
        return WindowsInput()

    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacOSFactory(GUIFactory):
    family: ClassVar[OSType] = OSType.MACOS

    def create_input(self) -> Input:
        return MacOSInput()

    def create_button(self) -> Button:
        return MacOSButton()

    def create_checkbox(self) -> Checkbox:
        return MacOSCheckbox()


GUI_FACTORY_REGISTRY: dict[OSType, type[GUIFactory]] = {
    OSType.WINDOWS: WindowsGUIFactory,
    OSType.MACOS: MacOSFactory,
}


def get_gui_factory(kind: OSType) -> GUIFactory:
    """Return the widget factory for the *kind* OS family."""
    return GUI_FACTORY_REGISTRY[kind]()
