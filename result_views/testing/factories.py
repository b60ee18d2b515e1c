"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from result_views.models.result import TestResult, Time


class TestResultFactory(ModelFactory[TestResult]):
    """Factory for TestResult.

    Results have no start time unless given one, so trees keep the order
    results were built in.
    """

    __test__ = False

    status = "passed"
    status_message = None
    status_details = None
    time = Use(Time)
    labels = Use(list)
    parameters = Use(list)
