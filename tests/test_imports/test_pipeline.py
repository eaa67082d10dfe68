"""Tests for the end-to-end roster ingestion pipeline."""

import pytest

from rosterdesk.imports.exceptions import (
    DecodeFailed,
    EmptyWorkbook,
    MissingColumns,
    RowMissingData,
    RowShapeMismatch,
    UnsupportedFormat,
)
from rosterdesk.imports.pipeline import ingest_upload
from rosterdesk.students.schemas import StudentCreate

CSV_HEADER = "rollnumber,name,email,department,year"


def _csv(*lines: str) -> bytes:
    return "\n".join(lines).encode()


@pytest.fixture
def existing(service):
    """Seed the roster with one student."""
    return service.add_student(
        StudentCreate(
            roll_number="OLD1",
            name="Existing",
            email="old@x.edu",
            department="Physics",
            year="3",
        )
    )


@pytest.fixture
def signals(notifier):
    """Record every change signal."""
    received = []
    notifier.subscribe(lambda: received.append(1))
    return received


class TestIngestCSV:
    """Tests for CSV uploads."""

    @pytest.mark.asyncio
    async def test_imports_every_non_blank_row(self, service, store, upload, signals):
        """Test imported count equals the non-blank data lines."""
        content = _csv(
            CSV_HEADER,
            "CS1,Asha,a@x.edu,CS,1",
            "",
            "CS2,Ravi,r@x.edu,CS,2",
            "EE1,Mina,m@x.edu,EE,1",
            "",
        )

        result = await ingest_upload(upload("students.csv", content), service)

        assert result.imported_count == 3
        assert result.file_format == "csv"
        records = store.load()
        assert [r.roll_number for r in records] == ["CS1", "CS2", "EE1"]
        assert records[2].name == "Mina"
        assert records[2].email == "m@x.edu"
        assert records[2].department == "EE"
        assert records[2].year == "1"
        assert [r.id for r in records] == result.student_ids
        assert len(signals) == 1

    @pytest.mark.asyncio
    async def test_appends_after_existing(self, service, store, upload, existing):
        """Test a batch is appended without de-duplication."""
        content = _csv(CSV_HEADER, "OLD1,Duplicate,d@x.edu,Physics,3")

        await ingest_upload(upload("students.csv", content), service)

        records = store.load()
        assert [r.id for r in records][0] == existing.id
        assert [r.roll_number for r in records] == ["OLD1", "OLD1"]

    @pytest.mark.asyncio
    async def test_missing_column_leaves_store(self, service, store, upload, existing, signals):
        """Test a missing rollnumber header names exactly that column."""
        content = _csv("name,email,department,year", "Asha,a@x.edu,CS,1")

        with pytest.raises(MissingColumns) as exc:
            await ingest_upload(upload("students.csv", content), service)

        assert exc.value.missing == ["rollnumber"]
        assert store.load() == [existing]
        assert signals == []

    @pytest.mark.asyncio
    async def test_bad_row_discards_whole_batch(self, service, store, upload, existing, signals):
        """Test valid rows before a short row are not committed."""
        content = _csv(
            CSV_HEADER,
            "CS1,Asha,a@x.edu,CS,1",
            "CS2,Ravi,r@x.edu,CS,2",
            "CS3,Mina,m@x.edu,CS",
        )

        with pytest.raises(RowShapeMismatch) as exc:
            await ingest_upload(upload("students.csv", content), service)

        assert exc.value.row == 4
        assert store.load() == [existing]
        assert signals == []

    @pytest.mark.asyncio
    async def test_missing_data_discards_batch(self, service, store, upload):
        """Test an empty required value rejects the upload."""
        content = _csv(CSV_HEADER, "CS1,Asha,a@x.edu,CS,1", "CS2,,r@x.edu,CS,2")

        with pytest.raises(RowMissingData) as exc:
            await ingest_upload(upload("students.csv", content), service)

        assert exc.value.row == 3
        assert store.load() == []

    @pytest.mark.asyncio
    async def test_header_only_commits_nothing(self, service, store, upload, signals):
        """Test a CSV without data rows imports zero records."""
        result = await ingest_upload(upload("students.csv", _csv(CSV_HEADER)), service)

        assert result.imported_count == 0
        assert store.load() == []
        assert signals == []

    @pytest.mark.asyncio
    async def test_undecodable_csv(self, service, store, upload, existing):
        """Test decode failures leave the store intact."""
        with pytest.raises(DecodeFailed):
            await ingest_upload(upload("students.csv", b"\xff\xfe\x00garbage"), service)
        assert store.load() == [existing]


class TestIngestExcel:
    """Tests for spreadsheet uploads."""

    @pytest.mark.asyncio
    async def test_imports_workbook(self, service, store, upload, xlsx_bytes):
        """Test a workbook is imported from its first sheet."""
        content = xlsx_bytes(
            [
                ["RollNumber", "Name", "Email", "Department", "Year"],
                ["CS1", "Asha", "a@x.edu", "CS", 1],
                [None, None, None, None, None],
                ["CS2", "Ravi", "r@x.edu", "CS", 2],
            ]
        )

        result = await ingest_upload(upload("students.xlsx", content), service)

        assert result.imported_count == 2
        assert result.file_format == "xlsx"
        assert [(r.roll_number, r.year) for r in store.load()] == [("CS1", "1"), ("CS2", "2")]

    @pytest.mark.asyncio
    async def test_header_only_workbook(self, service, store, upload, xlsx_bytes, signals):
        """Test a header row with no data raises EmptyWorkbook."""
        content = xlsx_bytes([["rollnumber", "name", "email", "department", "year"]])

        with pytest.raises(EmptyWorkbook):
            await ingest_upload(upload("students.xlsx", content), service)

        assert store.load() == []
        assert signals == []

    @pytest.mark.asyncio
    async def test_short_spreadsheet_row(self, service, store, upload, xlsx_bytes):
        """Test a row missing its last cell is a shape mismatch."""
        content = xlsx_bytes(
            [
                ["rollnumber", "name", "email", "department", "year"],
                ["CS1", "Asha", "a@x.edu", "CS", "1"],
                ["CS2", "Ravi", "r@x.edu", "CS"],
            ]
        )

        with pytest.raises(RowShapeMismatch) as exc:
            await ingest_upload(upload("students.xlsx", content), service)

        assert exc.value.row == 3
        assert store.load() == []


class TestUnsupportedUpload:
    """Tests for rejected formats."""

    @pytest.mark.asyncio
    async def test_rejected_before_reading(self, service, store, upload):
        """Test unsupported files are never read."""
        fake = upload("students.pdf", b"%PDF-1.4", "application/pdf")

        with pytest.raises(UnsupportedFormat):
            await ingest_upload(fake, service)

        assert fake.read_calls == 0
        assert store.load() == []
