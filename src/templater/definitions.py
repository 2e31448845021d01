"""
Template definitions loaded from configuration.

This module lets typed templates be described in a dict or YAML file
instead of code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from templater.exceptions import TemplateDefinitionError
from templater.formatting.formats import Format
from templater.templates.typed import TypedTemplate


class TemplateDefinition(BaseModel):
    """Configuration of a typed template.

    Targets are listed in order, each with the format of its values. A
    format is selected by its ``kind`` (``int``, ``number`` or ``string``).

    Examples:
        definition = TemplateDefinition.from_dict({
            "template": "Total: AMOUNT EUR",
            "targets": {"AMOUNT": {"kind": "number", "digits": 2}},
        })

        # From YAML file
        definition = TemplateDefinition.from_yaml("invoice.yaml")
        template = definition.build()
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    template: str
    targets: dict[str, Format] = {}

    @classmethod
    def from_dict(
        cls, config: dict[str, Any], source: str = "dict"
    ) -> TemplateDefinition:
        """Create from a dict.

        Args:
            config: Dictionary with ``template`` and ``targets`` keys
            source: Description of where config came from, for errors

        Returns:
            Validated TemplateDefinition

        Raises:
            TemplateDefinitionError: If config is not a valid definition
        """
        try:
            return cls.model_validate(config)
        except ValidationError as e:
            raise TemplateDefinitionError(source, str(e)) from e

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> TemplateDefinition:
        """Create from a YAML file.

        Args:
            yaml_path: Path to YAML file containing the definition

        Returns:
            Validated TemplateDefinition

        Example YAML:
            template: "Invoice NUMBER: TOTAL EUR"
            targets:
              NUMBER: {kind: int}
              TOTAL: {kind: number, digits: 2}
        """
        path = Path(yaml_path)
        with path.open() as f:
            try:
                config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise TemplateDefinitionError(str(path), str(e)) from e

        if not isinstance(config, dict):
            raise TemplateDefinitionError(str(path), "top level must be a mapping")

        return cls.from_dict(config, source=str(path))

    def build(self) -> TypedTemplate:
        """Compile the definition into a TypedTemplate."""
        return TypedTemplate(self.template, self.targets)
