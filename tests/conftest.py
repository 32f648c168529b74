"""
Shared fixtures for PostLang tests.
"""

import pytest

from postlang.core.logging import configure_logging

MINIMAL_SOURCE = """\
# "Title"
! "Claim"
+ 10% | "improvement"
> "Insight"
@ "Source" | https://example.com
"""

MINIMAL_OUTPUT = (
    "Title.\n"
    "\n"
    "Claim.\n"
    "\n"
    "Results:\n"
    "- 10% improvement\n"
    "\n"
    "Insight.\n"
    "\n"
    "Source: Source\n"
    "example.com"
)

FULL_SOURCE = """\
// Weekly write-up
^ title 60
^ total 650

# "Caching cut our p99 latency"
? "We serve 40k requests per second"
! "A read-through cache removed most database round trips"
+ 62% | "lower p99 latency"
+ 3x | "more requests per node"
> "Measure before adding infrastructure"
* "Staff engineer, platform team"
@ "Engineering blog" | https://www.example.com/caching | "Production data"
"""


@pytest.fixture(autouse=True)
def silent_logging():
    """Keep log output off stderr during tests."""
    configure_logging(level="silent", force=True)


@pytest.fixture
def minimal_source():
    return MINIMAL_SOURCE


@pytest.fixture
def minimal_output():
    return MINIMAL_OUTPUT


@pytest.fixture
def full_source():
    return FULL_SOURCE
