"""Tests for RecordBuilder: column dispatch, placeholders and two-phase resolution."""

from __future__ import annotations

from datetime import date

import pytest

from safetyaward.ingest.record_builder import RecordBuilder, build_records, split_name
from safetyaward.models.employee import EmploymentStatus, Track
from safetyaward.models.table import RawTable
from tests.fakes import make_table


@pytest.fixture
def builder():
    return RecordBuilder()


class TestSplitName:
    def test_parenthetical_marker_is_admin(self):
        assert split_name("Jane Doe (Office)") == ("Jane Doe", Track.ADMIN)

    def test_plain_name_is_field(self):
        assert split_name("John Roe") == ("John Roe", Track.FIELD)


class TestBuild:
    def test_routes_every_recognized_column(self, builder):
        table = make_table({
            "Employee Number": "1001",
            "Employee Name": "Ann Smith (Admin)",
            "Hire Date": "2015-04-01",
            "Term Date": "2021-08-31",
            "Re Hire Date": "2018-01-15",
            "Term Without Date": "FALSE",
            "Last Accident": "2017-02-02",
            "Next Award Name": "Set",
            "Award Received": "2019-09-09T00:00:00",
        })
        outcome = builder.build(table)
        assert outcome.ok
        [record] = outcome.value
        assert record.employee_id == "1001"
        assert record.name == "Ann Smith"
        assert record.track is Track.ADMIN
        assert record.hire_date == date(2015, 4, 1)
        assert record.termination_date == date(2021, 8, 31)
        assert record.rehire_date == date(2018, 1, 15)
        assert record.termination_override is False
        assert record.last_accident_date == date(2017, 2, 2)
        assert record.next_award_name == "Set"
        assert record.last_award_name == "Lunchbox"
        assert record.last_award_date == date(2019, 9, 9)

    def test_unrecognized_columns_are_ignored(self, builder):
        table = make_table(
            {"Employee Number": "5", "Department": "9999-99-99"},
            headers=["Employee Number", "Department"],
        )
        outcome = builder.build(table)
        assert outcome.ok
        assert outcome.value[0].employee_id == "5"

    def test_header_whitespace_is_trimmed(self, builder):
        table = RawTable.from_columns([[" Employee Number ", "12"], ["Hire Date  ", "2020-02-02"]])
        [record] = builder.build(table).value
        assert record.employee_id == "12"
        assert record.hire_date == date(2020, 2, 2)

    @pytest.mark.parametrize("placeholder", ["", ".", " "])
    def test_placeholders_leave_fields_unset(self, builder, placeholder):
        table = make_table({"Employee Number": "3", "Hire Date": placeholder, "Next Award Name": placeholder})
        outcome = builder.build(table)
        assert outcome.ok
        [record] = outcome.value
        assert record.hire_date is None
        assert record.next_award_name == ""
        assert record.last_award_name is None

    def test_placeholder_does_not_overwrite_earlier_value(self, builder):
        table = RawTable.from_columns([
            ["Employee Number", "3"],
            ["Hire Date", "2016-06-06"],
            ["Hire Date", "."],
        ])
        [record] = builder.build(table).value
        assert record.hire_date == date(2016, 6, 6)

    def test_bad_cell_keeps_rest_of_row(self, builder):
        table = make_table({
            "Employee Number": "8",
            "Hire Date": "06/01/2016",
            "Last Accident": "2020-10-10",
        })
        outcome = builder.build(table)
        assert not outcome.ok
        [record] = outcome.value
        assert record.hire_date is None
        assert record.last_accident_date == date(2020, 10, 10)
        [diag] = outcome.diagnostics
        assert diag.column == "Hire Date"
        assert diag.row == 1
        assert diag.text == "06/01/2016"

    def test_non_integer_employee_number_is_reported(self, builder):
        outcome = builder.build(make_table({"Employee Number": "E-44"}))
        assert [d.kind for d in outcome.diagnostics] == ["integer"]

    def test_award_resolution_independent_of_column_order(self, builder):
        table = make_table(
            {"Next Award Name": "Set", "Employee Name": "Bo Lee (Ops)", "Employee Number": "9"},
            headers=["Next Award Name", "Employee Name", "Employee Number"],
        )
        [record] = builder.build(table).value
        assert record.track is Track.ADMIN
        assert record.last_award_name == "Lunchbox"

    def test_status_independent_of_column_order(self, builder):
        table = make_table(
            {"Term Without Date": "FALSE", "Term Date": "2021-01-01", "Hire Date": "2020-01-01"},
            headers=["Term Without Date", "Term Date", "Hire Date"],
        )
        [record] = builder.build(table).value
        assert record.status is EmploymentStatus.TERMINATED

    def test_override_flag_terminates(self, builder):
        [record] = builder.build(make_table({"Employee Number": "2", "Term Without Date": "TRUE"})).value
        assert record.status is EmploymentStatus.TERMINATED
        assert not record.is_active

    def test_blank_rows_are_dropped(self, builder):
        table = make_table({"Employee Number": "1"}, {}, {"Employee Number": "2"})
        records = builder.build(table).value
        assert [r.employee_id for r in records] == ["1", "2"]

    def test_ragged_columns(self):
        table = RawTable.from_columns([["Employee Number", "1", "2"], ["Hire Date", "2020-01-01"]])
        records = build_records(table).value
        assert len(records) == 2
        assert records[1].hire_date is None

    def test_records_are_frozen(self, builder):
        [record] = builder.build(make_table({"Employee Number": "1"})).value
        with pytest.raises(Exception):
            record.employee_id = "2"
