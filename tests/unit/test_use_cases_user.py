"""
Unit tests for user use cases (List, Get, Update, Delete).
"""
from unittest.mock import AsyncMock

import pytest
from marketplace_api.application.dto.user_dto import DeletionSummary, UserUpdateRequest
from marketplace_api.application.exceptions import DuplicateEmailError, UserNotFoundError
from marketplace_api.application.use_cases.user.delete_user import DeleteUserUseCase
from marketplace_api.application.use_cases.user.get_user import GetUserUseCase
from marketplace_api.application.use_cases.user.list_users import ListUsersUseCase
from marketplace_api.application.use_cases.user.update_user import UpdateUserUseCase
from marketplace_api.core.security import verify_password
from tests.factories import USER_MONGO_ID, make_user


class TestListUsersUseCase:

    @pytest.mark.asyncio
    async def test_lists_users_without_password(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [make_user(), make_user(id="usr-2", email="b@example.com")]
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert [user.id for user in result] == ["usr-1", "usr-2"]
        assert all("password" not in user.model_dump(by_alias=True) for user in result)


class TestGetUserUseCase:

    @pytest.mark.asyncio
    async def test_found_by_application_id(self, mock_user_repo, mock_donation_repo):
        mock_user_repo.find_by_id.return_value = make_user()
        mock_donation_repo.count_delivered_by_donor.return_value = 3

        result = await GetUserUseCase(mock_user_repo, mock_donation_repo).execute("usr-1")

        assert result.id == "usr-1"
        assert result.donaciones_count == 3
        mock_user_repo.find_by_mongo_id.assert_not_called()
        mock_donation_repo.count_delivered_by_donor.assert_awaited_once_with(USER_MONGO_ID)

    @pytest.mark.asyncio
    async def test_falls_back_to_mongo_id(self, mock_user_repo, mock_donation_repo):
        mock_user_repo.find_by_id.return_value = None
        mock_user_repo.find_by_mongo_id.return_value = make_user()
        mock_donation_repo.count_delivered_by_donor.return_value = 0

        result = await GetUserUseCase(mock_user_repo, mock_donation_repo).execute(USER_MONGO_ID)

        assert result.mongo_id == USER_MONGO_ID
        mock_user_repo.find_by_mongo_id.assert_awaited_once_with(USER_MONGO_ID)

    @pytest.mark.asyncio
    async def test_soft_deleted_transactions_are_filtered(self, mock_user_repo, mock_donation_repo):
        mock_user_repo.find_by_id.return_value = make_user(
            transacciones=[{"ref": "a"}, {"ref": "b", "deleted": True}, {"ref": "c", "deleted": False}]
        )
        mock_donation_repo.count_delivered_by_donor.return_value = 0

        result = await GetUserUseCase(mock_user_repo, mock_donation_repo).execute("usr-1")

        assert [t["ref"] for t in result.transacciones] == ["a", "c"]

    @pytest.mark.asyncio
    async def test_not_found_raises(self, mock_user_repo, mock_donation_repo):
        mock_user_repo.find_by_id.return_value = None
        mock_user_repo.find_by_mongo_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await GetUserUseCase(mock_user_repo, mock_donation_repo).execute("missing")


class TestUpdateUserUseCase:

    @pytest.mark.asyncio
    async def test_only_present_fields_are_overwritten(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = make_user(nombre="Ana", telefono="000")
        mock_user_repo.save.side_effect = lambda user: user

        result = await UpdateUserUseCase(mock_user_repo).execute(
            "usr-1", UserUpdateRequest.model_validate({"telefono": "123"})
        )

        assert result.nombre == "Ana"
        assert result.telefono == "123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw, expected", [(True, True), ("true", True), ("false", False), (False, False)])
    async def test_mostrar_contacto_coerced(self, mock_user_repo, raw, expected):
        mock_user_repo.find_by_id.return_value = make_user(mostrar_contacto=not expected)
        mock_user_repo.save.side_effect = lambda user: user

        result = await UpdateUserUseCase(mock_user_repo).execute(
            "usr-1", UserUpdateRequest.model_validate({"mostrarContacto": raw})
        )
        assert result.mostrar_contacto is expected

    @pytest.mark.asyncio
    async def test_password_is_rehashed(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = make_user()
        mock_user_repo.save.side_effect = lambda user: user

        await UpdateUserUseCase(mock_user_repo).execute(
            "usr-1", UserUpdateRequest.model_validate({"password": "newsecret"})
        )

        saved_user = mock_user_repo.save.call_args.args[0]
        assert verify_password("newsecret", saved_user.hashed_password)

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = make_user()
        mock_user_repo.find_by_email.return_value = make_user(
            id="usr-2", mongo_id="64b7f0c2a1b2c3d4e5f60000", email="taken@example.com"
        )

        with pytest.raises(DuplicateEmailError):
            await UpdateUserUseCase(mock_user_repo).execute(
                "usr-1", UserUpdateRequest.model_validate({"email": "taken@example.com"})
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_found_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(UserNotFoundError):
            await UpdateUserUseCase(mock_user_repo).execute("missing", UserUpdateRequest())


class TestDeleteUserUseCase:

    @pytest.mark.asyncio
    async def test_delegates_to_cascade_and_returns_summary(self, mock_user_repo):
        user = make_user()
        mock_user_repo.find_by_id.return_value = user
        summary = DeletionSummary(user_deleted=True, products_deleted=2, favorites_cleaned=1, donations_deleted=4)
        deletion_service = AsyncMock()
        deletion_service.delete_user_cascade.return_value = summary

        result = await DeleteUserUseCase(mock_user_repo, deletion_service).execute("usr-1")

        deletion_service.delete_user_cascade.assert_awaited_once_with(user)
        assert result.summary == summary
        assert "deleted" in result.message

    @pytest.mark.asyncio
    async def test_not_found_skips_cascade(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        deletion_service = AsyncMock()

        with pytest.raises(UserNotFoundError):
            await DeleteUserUseCase(mock_user_repo, deletion_service).execute("missing")
        deletion_service.delete_user_cascade.assert_not_called()
