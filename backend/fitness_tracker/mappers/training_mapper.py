"""Conversions between the ``Training`` entity and its wire projections."""

from fitness_tracker.mappers.user_mapper import user_to_dto
from fitness_tracker.models import Training
from fitness_tracker.schemas import SimpleTrainingDto, TrainingDto


def training_to_dto(training: Training) -> TrainingDto:
    return TrainingDto(
        id=training.id,
        user=user_to_dto(training.user),
        start_time=training.start_time,
        end_time=training.end_time,
        activity_type=training.activity_type,
        distance=training.distance,
        average_speed=training.average_speed,
    )


def training_dto_to_entity(training_dto: TrainingDto) -> Training:
    return Training(
        id=training_dto.id,
        user_id=training_dto.user.id,
        start_time=training_dto.start_time,
        end_time=training_dto.end_time,
        activity_type=training_dto.activity_type,
        distance=training_dto.distance,
        average_speed=training_dto.average_speed,
    )


def simple_training_dto_to_entity(training_dto: SimpleTrainingDto, user_provider) -> Training:
    """Build a transient ``Training`` for the user referenced by ``userId``.

    ``user_provider`` is anything with ``get_user_or_raise(user_id)``
    (normally a ``UserService``); its ``NotFoundError`` propagates and no
    entity is produced. Only the owner's id is set on the entity, so the
    pending training never enters the session through the user's
    ``trainings`` collection.
    """
    user = user_provider.get_user_or_raise(training_dto.user_id)
    return Training(
        user_id=user.id,
        start_time=training_dto.start_time,
        end_time=training_dto.end_time,
        activity_type=training_dto.activity_type,
        distance=training_dto.distance,
        average_speed=training_dto.average_speed,
    )
