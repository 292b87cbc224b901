"""Tests for the safetyaward-migrate command line."""

from __future__ import annotations

import io
from datetime import datetime

import boto3
import pytest
from moto import mock_aws
from openpyxl import Workbook

from safetyaward import cli

HEADER = ["Employee Number", "Employee Name", "Hire Date", "Term Date", "Next Award Name", "Award Received"]


def _write_workbook(path, rows):
    wb = Workbook()
    ws = wb.active
    ws.title = "DataSheet"
    ws.append(HEADER)
    for row in rows:
        ws.append(row)
    buf = io.BytesIO()
    wb.save(buf)
    path.write_bytes(buf.getvalue())


@pytest.fixture
def ddb(monkeypatch):
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("SAFETYAWARD_LOG_TO_FILE", "false")
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name="us-east-1")
        resource.create_table(
            TableName="employees",
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield resource


def test_migrates_terminated_employees(ddb, tmp_path, capsys):
    workbook = tmp_path / "data.xlsx"
    _write_workbook(workbook, [
        [101, "Sam Field", datetime(2015, 3, 1), datetime(2022, 7, 15), "Backpack", "2021-01-20T00:00:00"],
        [102, "Pat Desk (Office)", datetime(2018, 5, 5), None, "Set", None],
    ])

    code = cli.main(["--workbook", str(workbook)])

    assert code == cli.EXIT_OK
    assert "inserted=1" in capsys.readouterr().out
    item = ddb.Table("employees").get_item(Key={"id": "101"})["Item"]
    assert item["safetyAwards"]["fieldTrack"]["1"]["receivedDate"] == "01/20/2021"
    assert "Item" not in ddb.Table("employees").get_item(Key={"id": "102"})


def test_malformed_cells_reject_batch(ddb, tmp_path, capsys):
    workbook = tmp_path / "data.xlsx"
    _write_workbook(workbook, [
        [101, "Sam Field", "3/1/2015", datetime(2022, 7, 15), "Cap", None],
    ])

    code = cli.main(["--workbook", str(workbook)])

    assert code == cli.EXIT_REJECTED
    assert "3/1/2015" in capsys.readouterr().err
    assert ddb.Table("employees").scan()["Count"] == 0


def test_missing_workbook_is_fatal(ddb, tmp_path):
    assert cli.main(["--workbook", str(tmp_path / "missing.xlsx")]) == cli.EXIT_FATAL


def test_flags_override_settings():
    args = cli.build_parser().parse_args([
        "--sheet", "Sheet2", "--mode", "active", "--dry-run", "--table-name", "staff",
    ])
    settings = cli.apply_overrides(cli.AppSettings(), args)
    assert settings.ingest.sheet == "Sheet2"
    assert settings.ingest.workbook == "data.xlsx"
    assert settings.mode == "active"
    assert settings.dry_run is True
    assert settings.dynamodb.table_name == "staff"
