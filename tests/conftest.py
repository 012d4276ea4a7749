"""Shared pytest fixtures for achparse tests."""

from pathlib import Path
import pytest

FILE_HEADER = "101 12345678012345678011409020123A094101YOUR BANK              YOUR COMPANY".ljust(94)
BATCH_HEADER = "5200YOUR COMPANY                        1234567890PPDPAYROLL         140903   1123456780000001"
ENTRY_ALICE = "62212345678011232132         0000001000               ALICE WANDERDUST        1123456780000001"
ADDENDA = "705HERE IS SOME ADDITIONAL INFORMATION".ljust(83) + "00000000001"
ENTRY_BILLY = "627123456780234234234        0000015000               BILLY HOLIDAY           0123456780000002"
ENTRY_RACHEL = "622123232318123123123        0000001213               RACHEL WELCH            0123456780000003"
BATCH_CONTROL = "82000000040037014587000000015000000000002213" + "1234567890".ljust(35) + "123456780000001"
FILE_CONTROL = "9000001000001000000040037014587000000015000000000002213".ljust(94)
PADDING = "9" * 94

SAMPLE_LINES = [
    FILE_HEADER,
    BATCH_HEADER,
    ENTRY_ALICE,
    ADDENDA,
    ENTRY_BILLY,
    ENTRY_RACHEL,
    BATCH_CONTROL,
    FILE_CONTROL,
]


def build_content(*lines: str) -> str:
    """Join record lines into file content."""
    return "\n".join(lines)


@pytest.fixture
def sample_content():
    """The eight-record sample ACH file as a string."""
    return build_content(*SAMPLE_LINES)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
