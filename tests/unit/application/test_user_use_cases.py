"""
Name: User Use Cases Unit Tests

Responsibilities:
  - CreateUserUseCase: sanitize -> validate -> hash -> persist, with logs
  - ListUsersUseCase: returns public views, logs the total
  - UpdateUserAvatarUseCase: validates existence and persists the new URL
  - Every failure is logged as an error and re-raised unchanged

Collaborators:
  - InMemoryUserRepository (real adapter, no DB)
  - Mock(spec=LoggerProvider) to assert log calls
"""

from unittest.mock import Mock

import pytest

from app.application.sanitizers import UserAvatarDataSanitizer, UserCreateDataSanitizer
from app.application.usecases import (
    CreateUserUseCase,
    ListUsersUseCase,
    UpdateUserAvatarUseCase,
)
from app.application.validators import (
    UserAvatarDataValidator,
    UserCreateDataValidator,
    UserUniqueEmailValidator,
)
from app.domain.entities import USER_DEFAULT_AVATAR_URL, UserMapped, UserRole
from app.domain.errors import (
    DuplicateResourceError,
    InvalidParamError,
    MissingParamError,
    UnregisteredParamError,
)
from app.domain.repositories import UserRepository
from app.domain.services import HashProvider
from app.infrastructure.validation import (
    BirthdateValidatorAdapter,
    EmailValidatorAdapter,
    PasswordValidatorAdapter,
    PhoneValidatorAdapter,
    UuidIdValidatorAdapter,
)

pytestmark = pytest.mark.unit


def _messages(mock_method: Mock) -> list[str]:
    return [call.args[0] for call in mock_method.call_args_list]


@pytest.fixture
def fake_hasher() -> Mock:
    hasher = Mock(spec=HashProvider)
    hasher.hash.side_effect = lambda plain: f"hashed::{plain}"
    return hasher


@pytest.fixture
def create_user(user_repository, fake_hasher, mock_logger) -> CreateUserUseCase:
    return CreateUserUseCase(
        repository=user_repository,
        sanitizer=UserCreateDataSanitizer(),
        validator=UserCreateDataValidator(
            email_validator=EmailValidatorAdapter(),
            phone_validator=PhoneValidatorAdapter("BR"),
            birthdate_validator=BirthdateValidatorAdapter(),
            password_validator=PasswordValidatorAdapter(),
            unique_email_validator=UserUniqueEmailValidator(user_repository),
        ),
        hash_provider=fake_hasher,
        logger=mock_logger,
    )


class TestCreateUserUseCase:
    def test_persists_sanitized_user_with_hashed_password(
        self, create_user, user_repository, user_payload_factory
    ):
        create_user.execute(
            user_payload_factory.create(name="  Maria Silva ", email=" MARIA@Example.com")
        )

        stored = user_repository.find_by_email("maria@example.com")
        assert stored is not None
        assert stored.name == "Maria Silva"
        assert stored.password == "hashed::S3nh@Forte"
        assert stored.role is UserRole.CLIENT
        assert stored.avatar_url == USER_DEFAULT_AVATAR_URL

    def test_logs_each_step(self, create_user, mock_logger, user_payload_factory):
        create_user.execute(user_payload_factory.create())

        assert _messages(mock_logger.debug) == [
            "Iniciando processo de criação de usuário",
            "Dados sanitizados com sucesso",
            "Dados validados com sucesso",
        ]
        mock_logger.info.assert_called_once()
        message, context = mock_logger.info.call_args.args
        assert message == "Usuário criado com sucesso"
        assert context["service"] == "CreateUserUseCase"
        assert context["method"] == "execute"
        mock_logger.error.assert_not_called()

    def test_missing_field_is_logged_and_reraised(
        self, create_user, mock_logger, user_repository, user_payload_factory
    ):
        with pytest.raises(MissingParamError, match="telefone"):
            create_user.execute(user_payload_factory.create(phone="   "))

        message, context = mock_logger.error.call_args.args
        assert message == "Erro ao criar usuário"
        assert context["metadata"]["error"]["name"] == "MissingParamError"
        assert "stack" in context["metadata"]["error"]
        assert user_repository.list() == []

    def test_weak_password(self, create_user, user_payload_factory, fake_hasher):
        with pytest.raises(InvalidParamError) as exc_info:
            create_user.execute(user_payload_factory.create(password="abc"))

        assert exc_info.value.message == (
            "Parâmetro inválido: Senha. Deve conter ao menos 8 caracteres."
        )
        fake_hasher.hash.assert_not_called()

    def test_duplicate_email_case_insensitive(self, create_user, user_payload_factory):
        create_user.execute(user_payload_factory.create())

        with pytest.raises(DuplicateResourceError):
            create_user.execute(user_payload_factory.create(email="MARIA@example.com"))

    def test_non_dict_body_reports_first_missing_field(self, create_user):
        with pytest.raises(MissingParamError, match="nome"):
            create_user.execute("not-a-dict")


class TestListUsersUseCase:
    def test_returns_public_views(self, user_repository, registered_user, mock_logger):
        users = ListUsersUseCase(repository=user_repository, logger=mock_logger).execute()

        assert len(users) == 1
        assert isinstance(users[0], UserMapped)
        assert users[0].id == registered_user.id
        _, context = mock_logger.info.call_args.args
        assert context["metadata"]["total"] == 1

    def test_empty_store(self, user_repository, mock_logger):
        assert ListUsersUseCase(repository=user_repository, logger=mock_logger).execute() == []

    def test_repository_failure_is_logged_and_reraised(self, mock_logger):
        repository = Mock(spec=UserRepository)
        repository.list.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            ListUsersUseCase(repository=repository, logger=mock_logger).execute()

        assert _messages(mock_logger.error) == ["Erro ao listar usuários"]


class TestUpdateUserAvatarUseCase:
    @pytest.fixture
    def update_avatar(self, user_repository, mock_logger) -> UpdateUserAvatarUseCase:
        return UpdateUserAvatarUseCase(
            repository=user_repository,
            sanitizer=UserAvatarDataSanitizer(),
            validator=UserAvatarDataValidator(
                id_validator=UuidIdValidatorAdapter(), repository=user_repository
            ),
            logger=mock_logger,
        )

    def test_updates_lowercased_url(
        self, update_avatar, user_repository, registered_user, mock_logger
    ):
        update_avatar.execute(
            {"id": f" {registered_user.id} ", "avatarUrl": " /Uploads/Avatars/ME.png "}
        )

        updated = user_repository.find_by_id(registered_user.id)
        assert updated.avatar_url == "/uploads/avatars/me.png"
        assert updated.updated_at >= registered_user.updated_at
        assert _messages(mock_logger.info) == ["Avatar do usuário atualizado com sucesso"]

    def test_unknown_user(self, update_avatar, mock_logger):
        with pytest.raises(UnregisteredParamError):
            update_avatar.execute(
                {"id": "00000000-0000-4000-8000-000000000000", "avatarUrl": "/a.png"}
            )

        assert _messages(mock_logger.error) == ["Erro ao atualizar o avatar do usuário"]

    def test_missing_avatar(self, update_avatar, registered_user):
        with pytest.raises(MissingParamError, match="avatar"):
            update_avatar.execute({"id": registered_user.id})
