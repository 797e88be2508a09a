"""Unit tests for the error code catalog and DomainException."""

import pytest

from qwery.domain.exceptions.code import Code, http_status_for
from qwery.domain.shared_kernel import DomainException


class TestHttpStatusFor:
    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (Code.NOTEBOOK_NOT_FOUND_ERROR.code, 404),
            (Code.CONVERSATION_NOT_FOUND_ERROR.code, 404),
            (Code.INVALID_STATE_TRANSITION_ERROR.code, 404),
            (Code.BAD_REQUEST_ERROR.code, 400),
            (Code.ACCESS_DENIED_ERROR.code, 403),
            (Code.ENTITY_NOT_FOUND_ERROR.code, 500),
            (Code.INTERNAL_ERROR.code, 500),
        ],
    )
    def test_mapping(self, code, status):
        assert http_status_for(code) == status


class TestCatalog:
    def test_entity_blocks(self):
        assert Code.NOTEBOOK_CREATE_ERROR.code == 2006
        assert Code.USER_CREATE_ERROR.code == 2106
        assert Code.WORKSPACE_CREATE_ERROR.code == 2205
        assert Code.ORGANIZATION_CREATE_ERROR.code == 2305
        assert Code.PROJECT_CREATE_ERROR.code == 2405
        assert Code.DATASOURCE_CREATE_ERROR.code == 2506
        assert Code.MESSAGE_CREATE_ERROR.code == 2805


class TestDomainException:
    def test_new_uses_catalog_message(self):
        exc = DomainException.new(Code.USER_NOT_FOUND_ERROR)
        assert exc.code == 2100
        assert exc.message == "User not found."
        assert exc.data is None

    def test_override_message_and_data(self):
        exc = DomainException.new(
            Code.NOTEBOOK_NOT_FOUND_ERROR,
            override_message="Notebook with id 'n1' not found",
            data={"notebook_id": "n1"},
        )
        assert str(exc) == "Notebook with id 'n1' not found"
        assert exc.data == {"notebook_id": "n1"}
