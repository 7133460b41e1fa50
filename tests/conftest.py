"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import bcrypt
import pytest

from ggdevlog.adapters.json_activity_repository import JsonActivityRepository
from ggdevlog.adapters.json_introduce_repository import JsonIntroduceRepository
from ggdevlog.config import Settings
from ggdevlog.containers import AppContainer
from ggdevlog.domain.boards import Board
from ggdevlog.domain.images import ImageRef
from ggdevlog.domain.posts import PostImages
from ggdevlog.services.activity import ActivityService
from ggdevlog.services.auth import AuthService
from ggdevlog.services.boards import BoardRepository, BoardService
from ggdevlog.services.credentials import CredentialVerifier
from ggdevlog.services.images import (
    ImageService,
    ImageStore,
    make_image_name,
    raise_for_failed_deletes,
)
from ggdevlog.services.introduce import IntroduceService
from ggdevlog.services.posts import PostRepository, PostService
from ggdevlog.services.throttle import LoginThrottle
from ggdevlog.services.tokens import SessionTokenService

ADMIN_PASSWORD = "correct horse battery staple"
JWT_SECRET = "test-signing-secret"


@dataclass
class FakeImageStore(ImageStore):
    """Image store keeping blobs in memory and recording every call."""

    calls: list[tuple[str, str]] = field(default_factory=list)
    objects: dict[str, bytes] = field(default_factory=dict)
    failing_names: set[str] = field(default_factory=set)
    closed: bool = False

    async def upload(self, data: bytes, original_file_name: str) -> ImageRef:
        name = make_image_name(original_file_name)
        self.objects[name] = data
        self.calls.append(("upload", name))
        return ImageRef(name=name, url=f"https://images.test/{name}")

    async def delete(self, names: Sequence[str]) -> None:
        failed = []
        for name in names:
            self.calls.append(("delete_image", name))
            if name in self.failing_names:
                failed.append(name)
                continue
            self.objects.pop(name, None)
        raise_for_failed_deletes(names, failed)

    async def close(self) -> None:
        self.closed = True


@dataclass
class InMemoryBoardRepository(BoardRepository):
    """In-memory board repository for tests."""

    boards: dict[int, Board] = field(default_factory=dict)

    def list_boards(self) -> list[Board]:
        return sorted(self.boards.values(), key=lambda board: board.name)

    def create_board(self, name: str) -> None:
        board_id = max(self.boards, default=0) + 1
        self.boards[board_id] = Board(id=board_id, name=name)

    def rename_board(self, board_id: int, name: str) -> None:
        self.boards[board_id] = Board(id=board_id, name=name)

    def delete_board(self, board_id: int) -> None:
        self.boards.pop(board_id, None)


@dataclass
class InMemoryPostRepository(PostRepository):
    """In-memory post repository sharing a call log with the image store."""

    calls: list[tuple[str, str]] = field(default_factory=list)
    posts: dict[int, dict[str, object]] = field(default_factory=dict)
    boards: dict[int, str] = field(default_factory=lambda: {1: "Python"})

    def add_post(
        self,
        thumbnail: dict[str, str] | None = None,
        images: list[object] | None = None,
        board_id: int = 1,
    ) -> int:
        return self.create_post(
            {
                "board_id": board_id,
                "title": "Title",
                "description": "Description",
                "thumbnail": thumbnail,
                "content": {"type": "doc"},
                "images": images or [],
            }
        )

    def list_posts(
        self, board_name: str | None, offset: int, limit: int
    ) -> tuple[list[dict[str, object]], int]:
        rows = [
            self._with_board(post)
            for post in sorted(
                self.posts.values(), key=lambda post: post["id"], reverse=True
            )
        ]
        if board_name is not None:
            rows = [row for row in rows if row["board"]["name"] == board_name]
        return rows[offset : offset + limit], len(rows)

    def get_post(self, post_id: int) -> dict[str, object] | None:
        post = self.posts.get(post_id)
        return self._with_board(post) if post else None

    def create_post(self, payload: dict[str, object]) -> int:
        post_id = max(self.posts, default=0) + 1
        self.posts[post_id] = {"id": post_id, **payload}
        return post_id

    def update_post(self, post_id: int, payload: dict[str, object]) -> int | None:
        if post_id not in self.posts:
            return None
        self.posts[post_id].update(payload)
        return post_id

    def get_post_images(self, post_id: int) -> PostImages | None:
        post = self.posts.get(post_id)
        if post is None:
            return None
        images = [ImageRef.from_payload(item) for item in post.get("images") or []]
        return PostImages(
            id=post_id,
            board_name=self.boards.get(post["board_id"]),
            thumbnail=ImageRef.from_payload(post.get("thumbnail")),
            images=[ref for ref in images if ref is not None],
        )

    def delete_post(self, post_id: int) -> None:
        self.calls.append(("delete_post", str(post_id)))
        self.posts.pop(post_id, None)

    def _with_board(self, post: dict[str, object]) -> dict[str, object]:
        board_id = post["board_id"]
        return {**post, "board": {"id": board_id, "name": self.boards.get(board_id)}}


@pytest.fixture(scope="session")
def admin_pw_hash() -> str:
    return bcrypt.hashpw(ADMIN_PASSWORD.encode(), bcrypt.gensalt(rounds=4)).decode()


@pytest.fixture
def settings(admin_pw_hash: str, tmp_path: Path) -> Settings:
    return Settings(
        jwt_secret=JWT_SECRET,
        admin_pw_hash=admin_pw_hash,
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        github_api_token="github-token",
        activity_file_path=str(tmp_path / "activity.json"),
        introduce_file_path=str(tmp_path / "introduce.json"),
        cookie_secure=False,
    )


@pytest.fixture
def calls() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def image_store(calls: list[tuple[str, str]]) -> FakeImageStore:
    return FakeImageStore(calls=calls)


@pytest.fixture
def post_repository(calls: list[tuple[str, str]]) -> InMemoryPostRepository:
    return InMemoryPostRepository(calls=calls)


@pytest.fixture
def board_repository() -> InMemoryBoardRepository:
    return InMemoryBoardRepository()


@pytest.fixture
def token_service() -> SessionTokenService:
    return SessionTokenService(JWT_SECRET)


@pytest.fixture
def container(
    settings: Settings,
    image_store: FakeImageStore,
    post_repository: InMemoryPostRepository,
    board_repository: InMemoryBoardRepository,
    token_service: SessionTokenService,
) -> AppContainer:
    auth_service = AuthService(
        credentials=CredentialVerifier(settings.admin_pw_hash),
        tokens=token_service,
        throttle=LoginThrottle(),
    )
    image_service = ImageService(image_store)

    async def close_resources() -> None:
        await image_store.close()

    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        board_service=BoardService(board_repository),
        post_service=PostService(
            repository=post_repository, image_service=image_service
        ),
        image_service=image_service,
        introduce_service=IntroduceService(
            JsonIntroduceRepository(Path(settings.introduce_file_path))
        ),
        activity_service=ActivityService(
            JsonActivityRepository(Path(settings.activity_file_path))
        ),
        close_resources=close_resources,
    )
