"""Shared fixtures for scanner tests."""

from __future__ import annotations

import pytest


def node(version=None, **children):
    """Build an npm ls style node with keyword-argument children."""
    data = {}
    if version is not None:
        data["version"] = version
    if children:
        data["dependencies"] = children
    return data


def tree(deps):
    return {"name": "my-app", "version": "1.0.0", "dependencies": deps}


@pytest.fixture
def sample_tree():
    return tree(
        {
            "express": node(
                "4.18.2",
                **{"left-pad": node("1.2.0"), "debug": node("2.6.9")},
            ),
            "gulp": node(
                "4.0.2",
                **{"event-stream": node("3.3.6", **{"flatmap-stream": node("0.1.1")})},
            ),
            "left-pad": node("1.3.0"),
        }
    )
