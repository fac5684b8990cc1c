"""Tests for suite composition and run order."""

from sunit import TestCase, TestResult, TestSuite, fail


def make_case(name):
    return TestCase(name, lambda: None)


def _failing(name):
    return TestCase(name, lambda: fail(name))


def test_empty_suite_has_no_failures():
    result = TestResult()
    TestSuite().run(result)
    assert result.failure_count() == 0


def test_failures_follow_suite_order():
    tests = [
        make_case("a"),
        _failing("b"),
        make_case("c"),
        _failing("d"),
        _failing("e"),
    ]
    result = TestResult()
    TestSuite(*tests).run(result)
    assert result.failure_count() == 3
    assert [f.failed_test for f in result.failures()] == [tests[1], tests[3], tests[4]]


def test_siblings_run_after_failure():
    ran = []
    suite = TestSuite(
        _failing("first"),
        TestCase("second", lambda: ran.append("second")),
    )
    suite.run(TestResult())
    assert ran == ["second"]


def test_nested_suites_flatten_failure_order():
    leaves = [_failing(f"t{i}") for i in range(5)]
    nested = TestSuite(
        leaves[0],
        TestSuite(leaves[1], TestSuite(leaves[2])),
        leaves[3],
        TestSuite(),
        TestSuite(leaves[4]),
    )
    flat = TestSuite(*leaves)

    nested_result = TestResult()
    flat_result = TestResult()
    nested.run(nested_result)
    flat.run(flat_result)

    assert [f.failed_test for f in nested_result.failures()] == leaves
    assert [f.failed_test for f in flat_result.failures()] == leaves


def test_add_test_appends():
    first = _failing("first")
    second = _failing("second")
    suite = TestSuite(first)
    suite.add_test(second)
    assert suite.tests == (first, second)
    assert len(suite) == 2

    result = TestResult()
    suite.run(result)
    assert [str(f.failed_test) for f in result.failures()] == ["first", "second"]


def test_from_names_calls_factory_in_order():
    seen = []

    def factory(name):
        seen.append(name)
        return _failing(name)

    suite = TestSuite.from_names(["x", "y", "z"], factory)
    assert seen == ["x", "y", "z"]

    result = TestResult()
    suite.run(result)
    assert [str(f.failed_test) for f in result.failures()] == ["x", "y", "z"]


def test_count_test_cases_counts_leaves():
    suite = TestSuite(make_case("a"), TestSuite(make_case("b"), make_case("c")))
    assert suite.count_test_cases() == 3
    assert len(suite) == 2


def test_end_to_end_example():
    class Example(TestCase):
        def run_test(self):
            if self.name == "t1":
                self.assert_true(True)
            elif self.name == "t2":
                self.assert_true(False)
            elif self.name == "t3":
                self.fail("boom")

    suite = TestSuite.from_names(["t1", "t2", "t3"], Example)
    result = TestResult()
    suite.run(result)

    assert result.failure_count() == 2
    lines = [str(f) for f in result.failures()]
    assert lines[0].startswith("t2 failed due to failed assertion: (no message)")
    assert lines[1] == "t3 failed due to failed assertion: boom"


def test_run_spies_each_child_once(mocker):
    child = make_case("child")
    spy = mocker.spy(child, "run")
    result = TestResult()
    TestSuite(child, TestSuite(child)).run(result)
    assert spy.call_count == 2
    for call in spy.call_args_list:
        assert call.args[-1] is result
