"""Shared pytest fixtures for the MI parser tests."""

import pytest

from mi_parser.values import FieldList


@pytest.fixture
def stopped_payload() -> str:
    """Provide the fields of a typical `*stopped` record after a breakpoint hit."""
    return (
        'reason="breakpoint-hit",disp="keep",bkptno="1",'
        'frame={addr="0x0000555555555131",func="main",args=[],'
        'file="main.c",fullname="/tmp/main.c",line="4",arch="i386:x86-64"},'
        'thread-id="1",stopped-threads="all",core="3"'
    )


@pytest.fixture
def breakpoint_table_payload() -> str:
    """Provide the fields of a `-break-list` result with two breakpoints."""
    return (
        "BreakpointTable={nr_rows=\"2\",nr_cols=\"6\","
        'hdr=[{width="7",alignment="-1",col_name="number",colhdr="Num"},'
        '{width="14",alignment="-1",col_name="type",colhdr="Type"}],'
        'body=[bkpt={number="1",type="breakpoint",fullname="main.cpp",line="10"},'
        'bkpt={number="2",type="breakpoint",fullname="main.cpp",line="20"}]}'
    )


@pytest.fixture
def frame_fields() -> FieldList:
    """Provide a hand-built field list describing a stack frame."""
    return (
        FieldList.builder()
        .add("level", "0")
        .add("func", "main")
        .add("args", [])
        .add("locals", ["x", "y"])
        .build()
    )
