"""
➡️ But : Rattacher les tags (table enfant) à leurs parents (todos, notes) en UNE seule requête.

Le repository de tags fourni doit exposer :
- parent_key : nom de la clé étrangère vers le parent ("todo_id", "note_id")
- list_for_parents(ids) : toutes les lignes de tags dont la clé étrangère est dans ids

🔹 Avantages :

Pas de requête par parent (N+1) : une requête, quel que soit le nombre de parents.
"""

from typing import Any, Dict, List, Sequence

from sqlmodel import SQLModel


class TagAggregator:
    def __init__(self, tag_repo):
        self.tags = tag_repo

    def attach_tags(self, parents: Sequence[SQLModel]) -> List[Dict[str, Any]]:
        """
        Retourne chaque parent sous forme de dict, enrichi d'une clé "tags".
        - liste vide -> [] sans aucune requête
        - l'ordre des tags est celui renvoyé par la base
        - un tag dont la clé ne correspond à aucun parent (orphelin) n'est jamais rattaché
        """
        if not parents:
            return []

        parent_ids = [p.id for p in parents]
        rows = self.tags.list_for_parents(parent_ids)
        key = self.tags.parent_key

        return [
            {
                **parent.model_dump(),
                "tags": [row.model_dump() for row in rows if getattr(row, key) == parent.id],
            }
            for parent in parents
        ]
