# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each profile request a connection to the user database and the friends page loader.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies wiring per-request SQLAlchemy sessions into ProfileStore and
# FriendsViewLoader.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.session, user_management infrastructure and domain
# 🔄 Connected Modules / Calls From:
# app.modules.user_management.presentation.api.v1.profiles

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.repositories.profile_repository import ProfileStore
from app.modules.user_management.domain.services.profile_visibility import FriendsViewLoader
from app.modules.user_management.infrastructure.database.profile_repository_impl import SQLAlchemyProfileStore
from app.shared.infrastructure.database.session import get_db_session


def get_profile_store(session: AsyncSession = Depends(get_db_session)) -> ProfileStore:
    """Profile store bound to the request's database session."""
    return SQLAlchemyProfileStore(session)


def get_friends_view_loader(profile_store: ProfileStore = Depends(get_profile_store)) -> FriendsViewLoader:
    return FriendsViewLoader(profile_store)
