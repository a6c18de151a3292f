"""
seed.py - Example issues
Single responsibility: build the collection shown when nothing was saved yet.
"""
from datetime import datetime, timedelta

from bugtracker.domain.models import Issue
from bugtracker.utils.time import to_iso, utc_now


def sample_issues(now: datetime | None = None) -> list[Issue]:
    """Two example bugs, newest first."""
    now = now or utc_now()
    return [
        Issue(
            id=1,
            title="Bouton de connexion ne répond pas",
            description="Le bouton de connexion ne réagit pas au clic sur la page d'accueil",
            severity="high",
            status="open",
            steps=(
                "1. Aller sur la page d'accueil\n"
                "2. Remplir les identifiants\n"
                '3. Cliquer sur "Se connecter"\n'
                "4. Aucune action ne se produit"
            ),
            created_at=to_iso(now),
        ),
        Issue(
            id=2,
            title="Erreur 404 sur la page profil",
            description="La page de profil utilisateur retourne une erreur 404",
            severity="critical",
            status="in-progress",
            steps=(
                "1. Se connecter\n"
                '2. Cliquer sur "Mon profil"\n'
                "3. Page 404 s'affiche"
            ),
            created_at=to_iso(now - timedelta(days=1)),
        ),
    ]
