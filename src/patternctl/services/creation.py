"""Creation services: factory, abstract factory, builder, and prototype demos."""

from __future__ import annotations

import dataclasses
from typing import Any

from patternctl.creational.abstract_factory import get_gui_factory
from patternctl.creational.builder import BasicPersonBuilder
from patternctl.creational.factory import get_document
from patternctl.creational.prototype import Employee, Person
from patternctl.domain.types import CopyStyle, DocumentType, OSType
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult


class DocumentService(BaseService):
    """Produce a document through the factory and walk its lifecycle."""

    def lifecycle(self, kind: str | None = None) -> ServiceResult:
        """Open, save, and close a document of *kind*.

        Falls back to ``[factory] document`` when *kind* is None.
        """
        op = "document_lifecycle"
        name = kind or self._settings.factory.document
        try:
            doc_type = DocumentType(name.lower())
        except ValueError:
            return self._unknown_kind(op, name, DocumentType)

        document = get_document(doc_type)
        document.open()
        document.save()
        document.close()
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": doc_type.value,
                "class": type(document).__name__,
                "steps": ["open", "save", "close"],
            },
        )


class GuiService(BaseService):
    """Render one widget of each capability from a single family."""

    def render(self, kind: str | None = None) -> ServiceResult:
        """Render input, button, and checkbox for the *kind* OS family.

        Falls back to ``[factory] os`` when *kind* is None.
        """
        op = "gui_render"
        name = kind or self._settings.factory.os
        try:
            os_type = OSType(name.lower())
        except ValueError:
            return self._unknown_kind(op, name, OSType)

        factory = get_gui_factory(os_type)
        widgets = [
            factory.create_input(),
            factory.create_button(),
            factory.create_checkbox(),
        ]
        for widget in widgets:
            widget.render()

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "family": os_type.value,
                "factory": type(factory).__name__,
                "widgets": [type(w).__name__ for w in widgets],
            },
        )


class PersonService(BaseService):
    """Builder and prototype demos over person values."""

    def build(
        self,
        *,
        name: str | None = None,
        age: int | None = None,
        gender: str | None = None,
        address: str | None = None,
    ) -> ServiceResult:
        """Build a frozen person, setting only the fields provided."""
        builder = BasicPersonBuilder()
        if name is not None:
            builder.set_name(name)
        if age is not None:
            builder.set_age(age)
        if gender is not None:
            builder.set_gender(gender)
        if address is not None:
            builder.set_address(address)
        person = builder.build()
        return ServiceResult(ok=True, op="build_person", data=person.model_dump())

    def clone(
        self,
        name: str,
        age: int,
        address: str,
        *,
        hobbies: list[str] | None = None,
        add_hobby: str | None = None,
        style: str = CopyStyle.COPY,
    ) -> ServiceResult:
        """Duplicate a person and optionally give only the copy a new hobby.

        *hobbies* defaults to ``[prototype] hobbies``.  The result reports
        both sides so the independence of the copy is visible.
        """
        op = "clone_person"
        try:
            copy_style = CopyStyle(style)
        except ValueError:
            return self._unknown_kind(op, style, CopyStyle)

        seed = list(self._settings.prototype.hobbies if hobbies is None else hobbies)
        original: Person | Employee
        duplicate: Person | Employee
        if copy_style is CopyStyle.COPY:
            original = Person(name, age, address, seed)
            duplicate = original.copy()
        else:
            original = Employee(name, age, address, seed)
            duplicate = original.clone()

        if add_hobby:
            duplicate.add_hobby(add_hobby)

        data: dict[str, Any] = {
            "style": copy_style.value,
            "original": dataclasses.asdict(original),
            "copy": dataclasses.asdict(duplicate),
            "same_identity": original is duplicate,
            "shares_hobbies": original.hobbies is duplicate.hobbies,
        }
        return ServiceResult(ok=True, op=op, data=data)
