import sqlite3
from datetime import date, timedelta

import pytest

from academy_api.app.models.course import CourseEntity
from academy_api.app.models.trainer import TrainerEntity


def add_course(repo, trainer, title="Java Basics", description="Intro to Java", days=5):
    return repo.save(
        CourseEntity(
            title=title,
            description=description,
            enroll_date=date.today() + timedelta(days=days),
            trainer=TrainerEntity(id=trainer.id),
        )
    )


class TestTrainerRepository:
    def test_save_assigns_id_and_timestamps(self, trainer_repository):
        saved = trainer_repository.save(TrainerEntity(full_name="John Doe"))
        assert saved.id is not None
        assert saved.full_name == "John Doe"
        assert saved.created_at is not None
        assert saved.updated_at is not None

    def test_find_all_in_insertion_order(self, trainer_repository):
        assert trainer_repository.find_all() == []
        first = trainer_repository.save(TrainerEntity(full_name="First"))
        second = trainer_repository.save(TrainerEntity(full_name="Second"))
        assert [t.id for t in trainer_repository.find_all()] == [first.id, second.id]

    def test_save_existing_overwrites(self, trainer_repository):
        saved = trainer_repository.save(TrainerEntity(full_name="Old Name"))
        updated = trainer_repository.save(TrainerEntity(id=saved.id, full_name="New Name"))
        assert updated.id == saved.id
        assert updated.created_at == saved.created_at
        assert trainer_repository.find_by_id(saved.id).full_name == "New Name"

    def test_exists_and_delete(self, trainer_repository):
        saved = trainer_repository.save(TrainerEntity(full_name="Temp"))
        assert trainer_repository.exists_by_id(saved.id)
        trainer_repository.delete_by_id(saved.id)
        assert not trainer_repository.exists_by_id(saved.id)
        assert trainer_repository.find_by_id(saved.id) is None

    def test_full_name_length_is_enforced(self, trainer_repository):
        with pytest.raises(sqlite3.IntegrityError):
            trainer_repository.save(TrainerEntity(full_name="x" * 101))

    def test_cannot_delete_trainer_with_courses(self, trainer_repository, course_repository):
        trainer = trainer_repository.save(TrainerEntity(full_name="Busy Trainer"))
        add_course(course_repository, trainer)
        with pytest.raises(sqlite3.IntegrityError):
            trainer_repository.delete_by_id(trainer.id)


class TestCourseRepository:
    @pytest.fixture
    def trainer(self, trainer_repository):
        return trainer_repository.save(TrainerEntity(full_name="John Doe"))

    def test_save_and_load_with_trainer_reference(self, course_repository, trainer):
        saved = add_course(course_repository, trainer)
        loaded = course_repository.find_by_id(saved.id)
        assert loaded.title == "Java Basics"
        assert loaded.enroll_date == date.today() + timedelta(days=5)
        assert loaded.trainer.id == trainer.id
        assert loaded.trainer.full_name == "John Doe"
        assert loaded.created_at is not None

    def test_update_in_place_keeps_created_at(self, course_repository, trainer):
        saved = add_course(course_repository, trainer)
        saved.title = "Java Advanced"
        updated = course_repository.save(saved)
        assert updated.id == saved.id
        assert updated.title == "Java Advanced"
        assert updated.created_at == saved.created_at
        assert len(course_repository.find_all()) == 1

    def test_unknown_trainer_violates_foreign_key(self, course_repository):
        with pytest.raises(sqlite3.IntegrityError):
            add_course(course_repository, TrainerEntity(id=999))

    def test_delete(self, course_repository, trainer):
        saved = add_course(course_repository, trainer)
        assert course_repository.exists_by_id(saved.id)
        course_repository.delete_by_id(saved.id)
        assert not course_repository.exists_by_id(saved.id)

    def test_filters(self, course_repository, trainer_repository, trainer):
        other = trainer_repository.save(TrainerEntity(full_name="Jane Roe"))
        java = add_course(course_repository, trainer, title="Java Basics", description="Intro to Java", days=1)
        spring = add_course(course_repository, trainer, title="Spring Boot", description="Learn Spring", days=20)
        add_course(course_repository, other, title="Python", description="Intro to Python")

        assert [c.id for c in course_repository.find_by_trainer_id(trainer.id)] == [java.id, spring.id]
        assert [c.id for c in course_repository.find_by_title_containing("Java")] == [java.id]
        assert course_repository.find_by_title_containing("java") == []
        assert len(course_repository.find_by_description_containing("Intro")) == 2
        after = date.today() + timedelta(days=10)
        assert [c.id for c in course_repository.find_by_trainer_id_and_enroll_date_after(trainer.id, after)] == [
            spring.id
        ]
        assert course_repository.count_by_trainer_id(trainer.id) == 2
        assert course_repository.count_by_trainer_id(other.id) == 1
        assert course_repository.exists_by_title_ignore_case("spring boot")
        assert not course_repository.exists_by_title_ignore_case("Ruby")
