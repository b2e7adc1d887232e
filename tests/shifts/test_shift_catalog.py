from src.attendance_payroll.attendance_payroll.shifts.service import ShiftCatalog, extract_shift_code
from tests.fakes import DAY_SHIFT, NIGHT_SHIFT, InMemoryShifts


def test_extract_shift_code():
    assert extract_shift_code("D1") == "D1"
    assert extract_shift_code("– S2 (21:00–06:00)") == "S2"
    assert extract_shift_code("  ") == ""
    assert extract_shift_code(None) == ""


def test_resolve_prefers_employee_shift_id():
    catalog = ShiftCatalog.load(InMemoryShifts())
    assert len(catalog) == 2
    shift, code = catalog.resolve(shift_id=1, employee_shift="S2", record_shift="S2")
    assert shift == DAY_SHIFT
    assert code == "D1"


def test_resolve_falls_back_to_codes():
    catalog = ShiftCatalog([DAY_SHIFT, NIGHT_SHIFT])
    assert catalog.resolve(employee_shift="– S2 (21:00–06:00)")[0] == NIGHT_SHIFT
    assert catalog.resolve(record_shift="D1")[0] == DAY_SHIFT


def test_unknown_code_is_kept_for_display():
    shift, code = ShiftCatalog([DAY_SHIFT]).resolve(employee_shift="X9")
    assert shift is None
    assert code == "X9"
