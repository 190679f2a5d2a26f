"""Unit tests for hana.options: option tuples stay in sync with the config literals."""

from __future__ import annotations

from typing import get_args

import pytest

from hana.config import (
    BuildTool,
    CodeQualityTool,
    CssFramework,
    CssPreprocessor,
    Language,
    NodeFramework,
    PackageManagerName,
    ReactRoutingLibrary,
    VueRoutingLibrary,
)
from hana.options import (
    BUILD_TOOL_OPTIONS,
    COMMON_CODE_QUALITY_TOOLS_OPTIONS,
    COMMON_LANGUAGE_OPTIONS,
    COMMON_MANAGER_OPTIONS,
    CSS_FRAMEWORK_OPTIONS,
    CSS_PREPROCESSOR_OPTIONS,
    NODE_FRAMEWORK_OPTIONS,
    PROJECT_TYPE_OPTIONS,
    REACT_ROUTING_LIBRARY_OPTIONS,
    VUE_ROUTING_LIBRARY_OPTIONS,
    Option,
    option_values,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "options, literal",
    [
        (COMMON_LANGUAGE_OPTIONS, Language),
        (COMMON_MANAGER_OPTIONS, PackageManagerName),
        (COMMON_CODE_QUALITY_TOOLS_OPTIONS, CodeQualityTool),
        (BUILD_TOOL_OPTIONS, BuildTool),
        (CSS_FRAMEWORK_OPTIONS, CssFramework),
        (CSS_PREPROCESSOR_OPTIONS, CssPreprocessor),
        (REACT_ROUTING_LIBRARY_OPTIONS, ReactRoutingLibrary),
        (VUE_ROUTING_LIBRARY_OPTIONS, VueRoutingLibrary),
        (NODE_FRAMEWORK_OPTIONS, NodeFramework),
    ],
)
def test_options_match_config_literals(options, literal):
    assert option_values(options) == list(get_args(literal))


def test_project_types():
    assert option_values(PROJECT_TYPE_OPTIONS) == ["react", "vue", "node", "blank"]


def test_option_is_label_value_pair():
    option = Option("Vite", "vite")
    assert option.label == "Vite"
    assert option.value == "vite"
