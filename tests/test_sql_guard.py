import pytest

import sql_guard


@pytest.mark.parametrize("statement", [
    "SELECT 1",
    "select id from t",
    "   \n\tSeLeCt * FROM t  ",
])
def test_select_accepted(statement):
    assert sql_guard.check(statement, "SELECT")


@pytest.mark.parametrize("statement", [
    "",
    "   ",
    "\n\t",
    "DELETE FROM t",
    "UPDATE t SET a = 1",
    "SHOW TABLES",
    "WITH x AS (SELECT 1) SELECT * FROM x",
    "-- comment\nSELECT 1",
])
def test_other_verbs_rejected(statement):
    assert not sql_guard.check(statement, "SELECT")


def test_show_verb():
    assert sql_guard.check("show index from member", "SHOW")
    assert not sql_guard.check("SELECT 1", "SHOW")


def test_prefix_only_not_a_parser():
    # the guard looks at the leading verb only
    assert sql_guard.check("SELECT my_proc_that_drops_things()", "SELECT")


def test_rejection_reason():
    assert sql_guard.rejection_reason("show") == "SHOW 문만 허용됩니다."
