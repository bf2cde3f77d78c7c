"""Pytest configuration and shared fixtures for the knots test suite."""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from knots.ast import (
    CodeBlock,
    Container,
    Diagram,
    Document,
    Heading,
    MathExpr,
    Paragraph,
    Text,
)

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50, suppress_health_check=[HealthCheck.too_slow])
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")
    config.addinivalue_line("markers", "security: Escaping and URL safety tests")


@pytest.fixture
def plain_document() -> Document:
    """Document with headings and prose only, no optional features."""
    return Document(
        title="Plain notes",
        authors=["Alice"],
        root=Container(children=[
            Heading(level=1, anchor="a", title="First", children=[
                Paragraph(children=[Text(content="Intro text")]),
                Heading(level=2, anchor="b", title="Second"),
                Heading(level=2, anchor="c", title="Third"),
            ]),
            Heading(level=1, anchor="d", title="Fourth"),
        ]),
    )


@pytest.fixture
def feature_document() -> Document:
    """Document that requires KaTeX, Prism and Mermaid."""
    return Document(
        title="Feature tour",
        authors=["Alice", "Bob", "Carol"],
        license="MIT",
        root=Container(children=[
            Heading(level=1, anchor="code", title="Code", children=[
                CodeBlock(language="rust", source="fn main() {}"),
                CodeBlock(language="python", source="print('hi')"),
                CodeBlock(language="rust", source="let x = 1;"),
            ]),
            Heading(level=1, anchor="math", title="Math", children=[
                Paragraph(children=[Text(content="Inline "), MathExpr(source="a^2 + b^2")]),
                MathExpr(source="\\int_0^1 x\\,dx", display_mode=True),
            ]),
            Heading(level=1, anchor="diagrams", title="Diagrams", children=[
                Diagram(source="graph TD; A-->B"),
            ]),
        ]),
    )


@pytest.fixture
def knots_logger_reset():
    """Restore the knots package logger after a test reconfigures it."""
    import logging

    package_logger = logging.getLogger("knots")
    yield package_logger
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
