import pytest

from domain_kits.document_contracts import Part


INTRODUCTION = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
BODY = (
    "Sollicitudin tempor id eu nisl nunc mi. Ut ornare lectus sit amet est placerat. "
    "Viverra maecenas accumsan lacus vel facilisis volutpat est velit egestas."
)
CONCLUSION = "Et magnis dis parturient montes nascetur ridiculus mus mauris. "


@pytest.fixture
def introduction():
    return Part("Introduction", INTRODUCTION)


@pytest.fixture
def body():
    return Part("Body", BODY)


@pytest.fixture
def conclusion():
    return Part("Conclusion", CONCLUSION)
