import pytest

from sqlderive.connection import Connection, Flavor
from sqlderive.errors import MiscError
from sqlderive.filters import And, Condition, NoFilter, Operator, Or, Value


class FlavoredConnection(Connection):
    def __init__(self, flavor=Flavor.SQLITE):
        self._flavor = flavor

    def flavor(self):
        return self._flavor

    def execute_with_params(self, query, params):
        raise MiscError("command not available")

    def execute_with_params_iterator(self, query, params_iter):
        raise MiscError("command not available")

    def query(self, query):
        raise MiscError("command not available")


class Word:
    def __init__(self, text):
        self.text = text

    def filter(self, conn):
        return self.text


class Failing:
    def filter(self, conn):
        raise MiscError("boom")


ONE = Word("1")
HOUSE = Word("House")


@pytest.fixture
def conn():
    return FlavoredConnection()


def test_and_combines_filter(conn):
    assert And(ONE, ONE).filter(conn) == "( 1 AND 1 )"
    assert And(ONE, HOUSE, ONE).filter(conn) == "( 1 AND House AND 1 )"
    assert And(ONE, HOUSE, HOUSE, ONE).filter(conn) == "( 1 AND House AND House AND 1 )"
    assert (
        And(ONE, HOUSE, HOUSE, ONE, HOUSE).filter(conn)
        == "( 1 AND House AND House AND 1 AND House )"
    )
    assert (
        And(ONE, HOUSE, HOUSE, ONE, HOUSE, HOUSE).filter(conn)
        == "( 1 AND House AND House AND 1 AND House AND House )"
    )


def test_or_combines_filter(conn):
    assert Or(ONE, ONE).filter(conn) == "( 1 OR 1 )"
    assert Or(ONE, HOUSE, ONE).filter(conn) == "( 1 OR House OR 1 )"
    assert Or(ONE, HOUSE, HOUSE, ONE).filter(conn) == "( 1 OR House OR House OR 1 )"
    assert (
        Or(ONE, HOUSE, HOUSE, ONE, HOUSE).filter(conn)
        == "( 1 OR House OR House OR 1 OR House )"
    )
    assert (
        Or(ONE, HOUSE, HOUSE, ONE, HOUSE, HOUSE).filter(conn)
        == "( 1 OR House OR House OR 1 OR House OR House )"
    )


@pytest.mark.parametrize("cls", [And, Or])
@pytest.mark.parametrize("count", [0, 1, 7])
def test_combination_arity_is_checked(cls, count):
    with pytest.raises(ValueError):
        cls(*([ONE] * count))


def test_combination_propagates_errors(conn):
    with pytest.raises(MiscError):
        And(ONE, Failing()).filter(conn)
    with pytest.raises(MiscError):
        Or(Failing(), ONE, HOUSE).filter(conn)


@pytest.mark.parametrize(
    "operator, value, expected",
    [
        (Operator.EQUAL, 1, "`key` = 1"),
        (Operator.NOT_EQUAL, 1, "`key` != 1"),
        (Operator.GREATER_THAN, 2, "`key` > 2"),
        (Operator.GREATER_EQUAL, 2, "`key` >= 2"),
        (Operator.LOWER_THAN, 2, "`key` < 2"),
        (Operator.LOWER_EQUAL, 2, "`key` <= 2"),
    ],
)
def test_condition_clause_for_integer(conn, operator, value, expected):
    assert Condition.from_label_operator("key", operator, value).filter(conn) == expected


@pytest.mark.parametrize(
    "operator, expected",
    [
        (Operator.EQUAL, "`key_str` = 'val'"),
        (Operator.NOT_EQUAL, "`key_str` != 'val'"),
        (Operator.GREATER_THAN, "`key_str` > 'val'"),
        (Operator.GREATER_EQUAL, "`key_str` >= 'val'"),
        (Operator.LOWER_THAN, "`key_str` < 'val'"),
        (Operator.LOWER_EQUAL, "`key_str` <= 'val'"),
    ],
)
def test_condition_clause_for_string(conn, operator, expected):
    assert Condition.from_label_operator("key_str", operator, "val").filter(conn) == expected


def test_condition_null_tests(conn):
    assert Condition.from_label_operator("key", Operator.IS_NULL).filter(conn) == "`key` IS NULL"
    assert (
        Condition.from_label_operator("key", Operator.IS_NOT_NULL).filter(conn)
        == "`key` IS NOT NULL"
    )


def test_condition_with_table(conn):
    condition = Condition.from_table_label_operator("table", "col", Operator.EQUAL, "val")
    assert condition.filter(conn) == "`table`.`col` = 'val'"


def test_condition_postgres_quoting():
    conn = FlavoredConnection(Flavor.POSTGRESQL)
    condition = Condition.from_table_label_operator("t", "c", Operator.EQUAL, 3)
    assert condition.filter(conn) == '"t"."c" = 3'


def test_condition_value_requirements():
    with pytest.raises(ValueError):
        Condition.from_label_operator("key", Operator.EQUAL)
    with pytest.raises(ValueError):
        Condition.from_label_operator("key", Operator.IS_NULL, 1)


def test_condition_in_combination(conn):
    combined = And(
        Condition.from_label_operator("id", Operator.EQUAL, 1),
        Condition.from_label_operator("name", Operator.NOT_EQUAL, "Jane Doe"),
    )
    assert combined.filter(conn) == "( `id` = 1 AND `name` != 'Jane Doe' )"


def test_no_filter_is_empty(conn):
    assert NoFilter().filter(conn) == ""


def test_value_rendering():
    assert str(Value.escaped("x")) == "'x'"
    assert str(Value.raw(5)) == "5"
    assert str(Value.of("abc")) == "'abc'"
    assert str(Value.of(7)) == "7"
    assert Value.of(Value.raw("r")) == Value.raw("r")


def test_value_rejects_invalid():
    with pytest.raises(ValueError):
        Value.of(-1)
    with pytest.raises(TypeError):
        Value.of(1.5)
    with pytest.raises(TypeError):
        Value.of(True)