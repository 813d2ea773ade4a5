"""
➡️ But : Les erreurs "métier" communes à toutes les couches.

Les repositories traduisent les erreurs SQLAlchemy en StoreFailure / ValidationFailure,
les services les laissent remonter, et seul app.main les convertit en réponses HTTP.
L'absence d'un enregistrement n'est PAS une erreur : les services renvoient None / False.
"""


class StoreFailure(Exception):
    """La base a échoué (connexion perdue, requête invalide...). `cause` garde l'exception d'origine."""

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ValidationFailure(StoreFailure):
    """Contrainte violée côté base (NOT NULL, clé étrangère, unicité)."""
