"""
Shared test fixtures and utilities for the templater test suite.
"""

import pytest

from templater.templates.compiler import CompiledTemplate, compile_template


@pytest.fixture
def greeting() -> CompiledTemplate:
    """Compiled ``Hello {name}!`` with the single target ``{name}``."""
    return compile_template("Hello {name}!", ["{name}"])


@pytest.fixture
def repeated() -> CompiledTemplate:
    """Compiled ``{A}-{A}`` where target ``A`` appears twice between braces."""
    return compile_template("{A}-{A}", ["A"])
