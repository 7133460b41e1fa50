"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import Client, ClientOptions, create_client

from ggdevlog.adapters.github_image_store import GithubImageStore
from ggdevlog.adapters.json_activity_repository import JsonActivityRepository
from ggdevlog.adapters.json_introduce_repository import JsonIntroduceRepository
from ggdevlog.adapters.supabase_board_repository import SupabaseBoardRepository
from ggdevlog.adapters.supabase_image_store import SupabaseImageStore
from ggdevlog.adapters.supabase_post_repository import SupabasePostRepository
from ggdevlog.config import Settings
from ggdevlog.services.activity import ActivityService
from ggdevlog.services.auth import AuthService
from ggdevlog.services.boards import BoardService
from ggdevlog.services.credentials import CredentialVerifier
from ggdevlog.services.images import ImageService, ImageStore
from ggdevlog.services.introduce import IntroduceService
from ggdevlog.services.posts import PostService
from ggdevlog.services.throttle import LoginThrottle
from ggdevlog.services.tokens import SessionTokenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    board_service: BoardService
    post_service: PostService
    image_service: ImageService
    introduce_service: IntroduceService
    activity_service: ActivityService
    close_resources: Callable[[], Awaitable[None]]


def build_image_store(settings: Settings, supabase_client: Client) -> ImageStore:
    """Create the image store selected by ``settings.image_store``."""
    if settings.image_store == "supabase":
        return SupabaseImageStore(
            client=supabase_client, bucket=settings.supabase_image_bucket
        )
    return GithubImageStore.create(
        token=settings.github_api_token or "",
        owner=settings.github_owner,
        repo=settings.github_repo,
        branch=settings.github_branch,
        directory=settings.github_image_dir,
        timeout=settings.image_store_timeout_seconds,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timeout = int(resolved_settings.image_store_timeout_seconds)
    supabase_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_service_key,
        options=ClientOptions(
            postgrest_client_timeout=timeout, storage_client_timeout=timeout
        ),
    )
    auth_service = AuthService(
        credentials=CredentialVerifier(resolved_settings.admin_pw_hash),
        tokens=SessionTokenService(resolved_settings.jwt_secret),
        throttle=LoginThrottle(),
    )
    image_store = build_image_store(resolved_settings, supabase_client)
    image_service = ImageService(image_store)
    post_service = PostService(
        repository=SupabasePostRepository(supabase_client),
        image_service=image_service,
    )
    board_service = BoardService(SupabaseBoardRepository(supabase_client))
    introduce_service = IntroduceService(
        JsonIntroduceRepository(Path(resolved_settings.introduce_file_path))
    )
    activity_service = ActivityService(
        JsonActivityRepository(Path(resolved_settings.activity_file_path))
    )

    async def close_resources() -> None:
        await image_store.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        board_service=board_service,
        post_service=post_service,
        image_service=image_service,
        introduce_service=introduce_service,
        activity_service=activity_service,
        close_resources=close_resources,
    )
