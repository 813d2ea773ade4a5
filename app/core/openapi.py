"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée et les conventions de l'API.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API todos & notes (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Chaque todo / note est renvoyé avec la liste de ses `tags`.\n"
            "- Pas de pagination : les listes sont complètes.\n"
            "- 404 si l'identifiant n'existe pas, 400 si une contrainte de la base est violée, "
            "500 (message générique) pour toute autre erreur de la base.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
