"""Trainings API router."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fitness_tracker.database import get_db
from fitness_tracker.mappers import simple_training_dto_to_entity, training_to_dto
from fitness_tracker.routers.users import get_user_service
from fitness_tracker.schemas import SimpleTrainingDto, TrainingDto
from fitness_tracker.services import TrainingService, UserService

router = APIRouter(prefix="/trainings", tags=["trainings"])


def get_training_service(db: Session = Depends(get_db)) -> TrainingService:
    return TrainingService(db)


@router.get("", response_model=List[TrainingDto])
def get_all_trainings(service: TrainingService = Depends(get_training_service)):
    """List every training."""
    return [training_to_dto(training) for training in service.get_all_trainings()]


@router.get("/{user_id}", response_model=List[TrainingDto])
def get_all_trainings_by_user_id(
    user_id: int,
    service: TrainingService = Depends(get_training_service),
):
    """List the trainings owned by a user."""
    return [
        training_to_dto(training)
        for training in service.get_all_trainings_by_user_id(user_id)
    ]


@router.post("", response_model=TrainingDto, status_code=status.HTTP_201_CREATED)
def create_training(
    training_dto: SimpleTrainingDto,
    service: TrainingService = Depends(get_training_service),
    user_service: UserService = Depends(get_user_service),
):
    """Record a training for an existing user."""
    training = simple_training_dto_to_entity(training_dto, user_service)
    return training_to_dto(service.create_training(training))
