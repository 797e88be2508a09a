"""Unit tests for the domain entities."""

import pytest

from qwery.domain.model.agent.conversation import DEFAULT_CONVERSATION_TITLE, Conversation
from qwery.domain.model.agent.message import Message, MessageRole
from qwery.domain.model.agent.state_machine import StateMachineDefinition, TransitionDefinition
from qwery.domain.model.datasource import Datasource, DatasourceKind
from qwery.domain.model.notebook import Cell, CellType, Notebook, RunMode
from qwery.domain.model.organization import Organization
from qwery.domain.model.project import Project
from qwery.domain.model.user import Roles, User
from qwery.domain.shared_kernel import generate_identity, is_uuid, shorten_id


class TestIdentity:
    def test_slug_is_id_prefix(self):
        entity_id, slug = generate_identity()
        assert is_uuid(entity_id)
        assert slug == entity_id[:8]
        assert shorten_id(entity_id) == slug

    @pytest.mark.parametrize("value", ["abc", "", "1234-5678", None])
    def test_is_uuid_rejects_non_uuids(self, value):
        assert is_uuid(value) is False

    def test_equality_is_by_id(self):
        a = Organization.create(name="A", created_by="u")
        b = Organization(id=a.id, name="B", created_by="other")
        assert a == b
        assert len({a, b}) == 1


class TestOrganization:
    def test_create_sets_audit_fields(self):
        org = Organization.create(name="Acme", created_by="alice")
        assert org.slug == org.id[:8]
        assert org.created_by == "alice"
        assert org.updated_by == "alice"
        assert org.is_owner is True

    def test_update_touches_updated_fields(self):
        org = Organization.create(name="Acme", created_by="alice")
        before = org.updated_at
        org.update(name="Acme 2", updated_by="bob")
        assert org.name == "Acme 2"
        assert org.updated_by == "bob"
        assert org.updated_at >= before
        assert org.created_by == "alice"


class TestProject:
    def test_create_defaults_to_active(self):
        project = Project.create(org_id="org-1", name="P", created_by="u")
        assert project.status == "active"
        assert project.description is None

    def test_update_ignores_none(self):
        project = Project.create(org_id="org-1", name="P", created_by="u", description="d")
        project.update(status="archived")
        assert project.name == "P"
        assert project.description == "d"
        assert project.status == "archived"


class TestUser:
    def test_default_role(self):
        assert User.create(username="alice").role == Roles.USER

    def test_update_role(self):
        user = User.create(username="alice")
        user.update(role=Roles.ADMIN)
        assert user.role == Roles.ADMIN


class TestDatasource:
    def test_create_normalizes_kind_and_config(self):
        ds = Datasource.create(
            project_id="p",
            name="warehouse",
            datasource_provider="postgresql",
            datasource_driver="pg",
            datasource_kind="remote",
            created_by="u",
        )
        assert ds.datasource_kind is DatasourceKind.REMOTE
        assert ds.config == {}
        assert ds.description == ""


class TestNotebook:
    def test_update_bumps_version(self):
        notebook = Notebook.create(project_id="p", title="Sales", created_by="u")
        assert notebook.version == 1
        notebook.update(title="Sales Q1")
        notebook.update(cells=[Cell(cell_id=1, query="SELECT 1")])
        assert notebook.version == 3
        assert notebook.cells[0].query == "SELECT 1"

    def test_cell_dict_round_trip_uses_enum_values(self):
        cell = Cell(cell_id=2, cell_type=CellType.PROMPT, run_mode=RunMode.FIXIT)
        data = cell.to_dict()
        assert data["cell_type"] == "prompt"
        assert data["run_mode"] == "fixit"
        assert Cell.from_dict(data) == cell

    def test_cell_from_dict_defaults(self):
        cell = Cell.from_dict({"cell_id": "3"})
        assert cell.cell_id == 3
        assert cell.cell_type is CellType.QUERY
        assert cell.is_active is True


class TestConversation:
    def test_default_title(self):
        conversation = Conversation.create(project_id="p", task_id="t", created_by="u")
        assert conversation.title == DEFAULT_CONVERSATION_TITLE
        assert conversation.has_default_title

    def test_explicit_title(self):
        conversation = Conversation.create(project_id="p", task_id="t", created_by="u", title="Hi")
        assert not conversation.has_default_title


class TestMessage:
    def test_text_from_parts(self):
        message = Message.create(
            conversation_id="c",
            content={
                "id": "m1",
                "role": "user",
                "parts": [
                    {"type": "text", "text": "hello"},
                    {"type": "tool-call", "text": "ignored"},
                    {"type": "text", "text": "world"},
                ],
            },
            role=MessageRole.USER,
            created_by="u",
        )
        assert message.text == "hello world"

    def test_text_from_legacy_content(self):
        message = Message.create(
            conversation_id="c", content={"text": "legacy"}, role="assistant", created_by="u"
        )
        assert message.role is MessageRole.ASSISTANT
        assert message.text == "legacy"

    def test_explicit_id_is_kept(self):
        message = Message.create(
            conversation_id="c", content={}, role="user", created_by="u", message_id="ui-1"
        )
        assert message.id == "ui-1"


class TestStateMachineDefinition:
    def test_find_transition(self):
        fsm = StateMachineDefinition(
            id="fsm.coder.v1",
            name="coder",
            initial_phase="plan",
            terminal_phases={"done"},
            transitions=[
                TransitionDefinition("plan", "start", "code"),
                TransitionDefinition("code", "finish", "done"),
            ],
        )
        assert fsm.find_transition("plan", "start").to_phase == "code"
        assert fsm.find_transition("plan", "finish") is None
        assert fsm.is_terminal("done")
        assert not fsm.is_terminal("code")
