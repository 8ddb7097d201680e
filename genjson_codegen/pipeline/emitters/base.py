"""
Base class for serializer emitters.

Emitters render one discovery record into the C++ text of its
``GenJson::TSerializer`` specialization, using jinja2 templates.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ...utils import escape_cpp_string
from ..analyzer.units import DiscoveryKind, DiscoveryRecord
from ..config import CodeGeneratorConfig

TEMPLATES_DIR = Path(__file__).parent.parent.parent.resolve() / "templates" / "cpp"


def make_template_environment() -> jinja2.Environment:
    """Create the jinja2 environment used by all emitters."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(TEMPLATES_DIR),
        lstrip_blocks=True,
        trim_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["cpp_string"] = escape_cpp_string
    return env


class Emitter(ABC):
    """Abstract base class for serializer emitters."""

    # Template file under templates/cpp
    TEMPLATE_NAME: str = ""

    # Discovery kinds this emitter can render
    SUPPORTED_KINDS: frozenset[DiscoveryKind] = frozenset({DiscoveryKind.SERIALIZE})

    def __init__(self, config: CodeGeneratorConfig | None = None, env: jinja2.Environment | None = None):
        """
        Initialize the emitter.

        Args:
            config: Code generation configuration
            env: Shared jinja2 environment; a new one is created when omitted
        """
        self.config = config or CodeGeneratorConfig()
        self.env = env or make_template_environment()
        self.template = self.env.get_template(self.TEMPLATE_NAME)

    def emit(self, record: DiscoveryRecord, kind: DiscoveryKind = DiscoveryKind.SERIALIZE) -> str:
        """
        Render the serializer definition for ``record``.

        Args:
            record: The discovered declaration
            kind: Export direction to render

        Returns:
            C++ source text, without trailing newline or macro continuations

        Raises:
            NotImplementedError: If the emitter does not support ``kind``
        """
        if kind not in self.SUPPORTED_KINDS:
            raise NotImplementedError(f"{type(self).__name__} does not emit {kind.value} code")
        return self.template.render(self.build_context(record, kind)).rstrip("\n")

    @abstractmethod
    def build_context(self, record: DiscoveryRecord, kind: DiscoveryKind) -> dict:
        """
        Build the template context for ``record``.

        Args:
            record: The discovered declaration
            kind: Export direction to render

        Returns:
            Variables passed to the template
        """
