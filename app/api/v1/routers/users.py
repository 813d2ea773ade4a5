from fastapi import APIRouter, Depends, HTTPException, status
from app.api.v1.dependencies import get_user_service
from app.features.users.schemas import UserCreate, UserOut
from app.features.users.services import UserService

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"description": "Not Found"}},
)


@router.post(
    "",
    summary="Créer un utilisateur",
    status_code=status.HTTP_201_CREATED,
    response_model=UserOut,
    responses={400: {"description": "Email déjà utilisé ou champ manquant"}},
)
def create_user(payload: UserCreate, svc: UserService = Depends(get_user_service)):
    return svc.create(name=payload.name, email=payload.email)


@router.get(
    "/{user_id}",
    summary="Récupérer un utilisateur",
    response_model=UserOut,
)
def get_user(user_id: int, svc: UserService = Depends(get_user_service)):
    user = svc.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return user
