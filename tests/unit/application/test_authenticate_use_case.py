"""
Name: Authenticate User Use Case Unit Tests

Responsibilities:
  - Valid credentials return the public user and a verifiable token
  - Unknown email and wrong password fail with the SAME 401 error
  - Missing credentials fail with MissingParamError
"""

import pytest

from app.application.sanitizers import AuthDataSanitizer
from app.application.usecases import AuthenticateUserUseCase
from app.application.validators import AuthDataValidator
from app.domain.entities import AuthResult, UserMapped, UserRole
from app.domain.errors import InvalidCredentialsError, MissingParamError

pytestmark = pytest.mark.unit


@pytest.fixture
def authenticate(
    user_repository, hash_provider, jwt_provider, mock_logger
) -> AuthenticateUserUseCase:
    return AuthenticateUserUseCase(
        repository=user_repository,
        sanitizer=AuthDataSanitizer(),
        validator=AuthDataValidator(),
        hash_provider=hash_provider,
        jwt_provider=jwt_provider,
        logger=mock_logger,
    )


def test_valid_credentials(authenticate, registered_user, jwt_provider, mock_logger):
    result = authenticate.execute(
        {"email": "  MARIA@example.com ", "password": "S3nh@Forte"}
    )

    assert isinstance(result, AuthResult)
    assert isinstance(result.user, UserMapped)
    assert result.user.id == registered_user.id
    payload = jwt_provider.verify(result.access_token)
    assert payload.user_id == registered_user.id
    assert payload.role is UserRole.CLIENT
    assert mock_logger.info.call_args.args[0] == "Usuário autenticado com sucesso"


def test_unknown_email_and_wrong_password_are_indistinguishable(
    authenticate, registered_user
):
    with pytest.raises(InvalidCredentialsError) as unknown:
        authenticate.execute({"email": "ghost@example.com", "password": "S3nh@Forte"})
    with pytest.raises(InvalidCredentialsError) as wrong:
        authenticate.execute({"email": registered_user.email, "password": "Wr0ng@Pass"})

    assert unknown.value.message == wrong.value.message
    assert unknown.value.status_code == wrong.value.status_code == 401


def test_failure_is_logged(authenticate, mock_logger):
    with pytest.raises(InvalidCredentialsError):
        authenticate.execute({"email": "ghost@example.com", "password": "x"})

    message, context = mock_logger.error.call_args.args
    assert message == "Erro ao autenticar usuário"
    assert context["metadata"]["error"]["name"] == "InvalidCredentialsError"


def test_missing_password(authenticate):
    with pytest.raises(MissingParamError, match="senha"):
        authenticate.execute({"email": "maria@example.com"})
