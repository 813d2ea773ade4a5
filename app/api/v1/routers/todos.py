"""
➡️ But : Définir les endpoints de l’API.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, PATCH, DELETE…)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Chaque fonction représente une route.

⚠️ Les routes fixes (/search/..., /tag/...) sont déclarées avant /{todo_id}.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api.v1.dependencies import get_todo_service
from app.features.todos.schemas import TagCreate, TodoCreate, TodoOut, TodoTagOut, TodoUpdate
from app.features.todos.services import TodoService

TODO_NOT_FOUND = "Todo not found."

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not Found"}},
)


@router.get(
    "",
    summary="Lister les todos",
    description="Retourne tous les todos, chacun avec ses tags.",
    response_model=List[TodoOut],
)
def list_todos(svc: TodoService = Depends(get_todo_service)):
    return svc.list()


@router.get(
    "/search/{title}",
    summary="Chercher des todos par titre",
    description="Sous-chaîne du titre, insensible à la casse. Peut renvoyer une liste vide.",
    response_model=List[TodoOut],
)
def search_todos(title: str, svc: TodoService = Depends(get_todo_service)):
    return svc.search_by_title(title)


@router.get(
    "/tag/{tag}",
    summary="Filtrer les todos par tag",
    response_model=List[TodoOut],
)
def list_todos_by_tag(tag: str, svc: TodoService = Depends(get_todo_service)):
    return svc.list_by_tag(tag)


@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
    responses={400: {"description": "Champ obligatoire manquant"}},
)
def create_todo(payload: TodoCreate, svc: TodoService = Depends(get_todo_service)):
    return svc.create(title=payload.title, description=payload.description)


@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    todo = svc.get(todo_id)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return todo


def _update_or_404(todo_id: int, payload: TodoUpdate, svc: TodoService) -> TodoOut:
    todo = svc.update(todo_id, payload)
    if todo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return todo


@router.put(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    description="Patch partiel : seuls les champs présents dans le corps sont modifiés.",
    response_model=TodoOut,
)
def put_todo(todo_id: int, payload: TodoUpdate, svc: TodoService = Depends(get_todo_service)):
    return _update_or_404(todo_id, payload, svc)


@router.patch(
    "/{todo_id}",
    summary="Mettre à jour un todo (alias PATCH)",
    response_model=TodoOut,
)
def patch_todo(todo_id: int, payload: TodoUpdate, svc: TodoService = Depends(get_todo_service)):
    return _update_or_404(todo_id, payload, svc)


@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_todo(todo_id: int, svc: TodoService = Depends(get_todo_service)):
    if not svc.delete(todo_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{todo_id}/tags",
    summary="Ajouter un tag à un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoTagOut,
)
def add_todo_tag(todo_id: int, payload: TagCreate, svc: TodoService = Depends(get_todo_service)):
    tag = svc.add_tag(todo_id, payload.tag)
    if tag is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TODO_NOT_FOUND)
    return tag
