from unittest.mock import MagicMock

import pytest

from academy_api.app.core.exceptions import BadRequestError, NotFoundError
from academy_api.app.mappers.trainer_mapper import TrainerMapper
from academy_api.app.models.trainer import TrainerEntity
from academy_api.app.services.trainer_service import TrainerService


@pytest.fixture
def repository():
    repo = MagicMock()
    repo.save.side_effect = lambda trainer: trainer
    return repo


@pytest.fixture
def service(repository):
    return TrainerService(repository, TrainerMapper())


def test_constructor_requires_collaborators():
    with pytest.raises(ValueError):
        TrainerService(None, TrainerMapper())
    with pytest.raises(ValueError):
        TrainerService(MagicMock(), None)


def test_get_all_trainers(service, repository):
    repository.find_all.return_value = [
        TrainerEntity(id=1, full_name="Trainer1"),
        TrainerEntity(id=2, full_name="Trainer2"),
    ]
    result = service.get_all_trainers()
    assert [r.full_name for r in result] == ["Trainer1", "Trainer2"]
    assert [r.id for r in result] == [1, 2]


def test_get_all_trainers_empty(service, repository):
    repository.find_all.return_value = []
    assert service.get_all_trainers() == []


def test_get_trainer_by_id(service, repository):
    repository.find_by_id.return_value = TrainerEntity(id=1, full_name="Trainer1")
    result = service.get_trainer_by_id(1)
    assert result.full_name == "Trainer1"
    repository.find_by_id.assert_called_once_with(1)


def test_get_trainer_by_id_not_found_mentions_id(service, repository):
    repository.find_by_id.return_value = None
    with pytest.raises(NotFoundError) as exc_info:
        service.get_trainer_by_id(42)
    assert "42" in exc_info.value.message
    assert exc_info.value.status_code == 404


def test_create_trainer(service, repository):
    repository.save.side_effect = None
    repository.save.return_value = TrainerEntity(id=5, full_name="New Trainer")
    entity = TrainerEntity(full_name="New Trainer")

    result = service.create_trainer(entity)

    assert result.id == 5
    assert result.full_name == "New Trainer"
    repository.save.assert_called_once_with(entity)


def test_create_trainer_none_is_bad_request(service, repository):
    with pytest.raises(BadRequestError):
        service.create_trainer(None)
    repository.save.assert_not_called()


def test_update_trainer_forces_path_id(service, repository):
    repository.exists_by_id.return_value = True
    entity = TrainerEntity(id=99, full_name="Updated Name")

    result = service.update_trainer(1, entity)

    assert result.id == 1
    assert result.full_name == "Updated Name"
    saved = repository.save.call_args[0][0]
    assert saved.id == 1
    assert saved.full_name == "Updated Name"


def test_update_trainer_with_null_input_id(service, repository):
    repository.exists_by_id.return_value = True
    result = service.update_trainer(1, TrainerEntity(full_name="Updated Name"))
    assert result.id == 1


@pytest.mark.parametrize("trainer_id, entity", [(None, TrainerEntity(full_name="x")), (1, None)])
def test_update_trainer_missing_arguments(service, repository, trainer_id, entity):
    with pytest.raises(BadRequestError):
        service.update_trainer(trainer_id, entity)
    repository.save.assert_not_called()


def test_update_trainer_not_found(service, repository):
    repository.exists_by_id.return_value = False
    with pytest.raises(NotFoundError):
        service.update_trainer(3, TrainerEntity(full_name="Nobody"))
    repository.save.assert_not_called()


def test_delete_existing_trainer(service, repository):
    repository.exists_by_id.return_value = True
    assert service.delete_trainer_by_id(1) is True
    repository.delete_by_id.assert_called_once_with(1)


def test_delete_missing_trainer(service, repository):
    repository.exists_by_id.return_value = False
    assert service.delete_trainer_by_id(1) is False
    repository.delete_by_id.assert_not_called()
