"""Tests for post management and the image cascade."""

import asyncio

import pytest

from ggdevlog.errors import DeleteError, DeleteErrorKind, NotFoundError
from ggdevlog.services.images import ImageService
from ggdevlog.services.posts import PostService
from tests.conftest import FakeImageStore, InMemoryPostRepository


@pytest.fixture
def service(
    post_repository: InMemoryPostRepository, image_store: FakeImageStore
) -> PostService:
    return PostService(post_repository, ImageService(image_store))


def test_cascade_deletes_images_before_post(
    service: PostService,
    post_repository: InMemoryPostRepository,
    calls: list[tuple[str, str]],
) -> None:
    post_id = post_repository.add_post(
        thumbnail={"img_name": "img_1.png", "img_url": "https://images.test/1"},
        images=["img_2.png"],
    )

    board_name = asyncio.run(service.delete_post_cascade(post_id))

    assert board_name == "Python"
    assert calls == [
        ("delete_image", "img_1.png"),
        ("delete_image", "img_2.png"),
        ("delete_post", str(post_id)),
    ]
    assert post_id not in post_repository.posts


def test_cascade_without_images_deletes_post_directly(
    service: PostService,
    post_repository: InMemoryPostRepository,
    calls: list[tuple[str, str]],
) -> None:
    post_id = post_repository.add_post(thumbnail=None, images=[])

    asyncio.run(service.delete_post_cascade(post_id))

    assert calls == [("delete_post", str(post_id))]


def test_cascade_reads_legacy_thumbnail_key(
    service: PostService,
    post_repository: InMemoryPostRepository,
    calls: list[tuple[str, str]],
) -> None:
    post_id = post_repository.add_post(
        thumbnail={"image_name": "img_old.jpg"},
        images=[{"img_name": "img_body.jpg", "img_url": "u"}, "img_old.jpg"],
    )

    asyncio.run(service.delete_post_cascade(post_id))

    assert calls == [
        ("delete_image", "img_old.jpg"),
        ("delete_image", "img_body.jpg"),
        ("delete_post", str(post_id)),
    ]


def test_cascade_for_missing_post_issues_no_deletes(
    service: PostService, calls: list[tuple[str, str]]
) -> None:
    with pytest.raises(NotFoundError):
        asyncio.run(service.delete_post_cascade(999))

    assert calls == []


def test_cascade_aborts_when_image_deletion_fails(
    service: PostService,
    post_repository: InMemoryPostRepository,
    image_store: FakeImageStore,
    calls: list[tuple[str, str]],
) -> None:
    image_store.failing_names = {"img_2.png"}
    post_id = post_repository.add_post(
        thumbnail={"img_name": "img_1.png", "img_url": "u"}, images=["img_2.png"]
    )

    with pytest.raises(DeleteError) as exc_info:
        asyncio.run(service.delete_post_cascade(post_id))

    assert exc_info.value.kind is DeleteErrorKind.PARTIAL_FAILURE
    assert exc_info.value.failed_names == ["img_2.png"]
    assert ("delete_post", str(post_id)) not in calls
    assert post_id in post_repository.posts


def test_list_posts_defaults_and_pagination(
    service: PostService, post_repository: InMemoryPostRepository
) -> None:
    for _ in range(7):
        post_repository.add_post()

    page = service.list_posts(None, None, None)

    assert page.board_name == "all"
    assert (page.page, page.limit, page.total, page.total_pages) == (1, 5, 7, 2)
    assert [row["id"] for row in page.rows] == [7, 6, 5, 4, 3]

    second = service.list_posts("all", 2, 5)
    assert [row["id"] for row in second.rows] == [2, 1]


def test_list_posts_filters_by_board(
    service: PostService, post_repository: InMemoryPostRepository
) -> None:
    post_repository.boards[2] = "Rust"
    post_repository.add_post(board_id=1)
    post_repository.add_post(board_id=2)

    page = service.list_posts("Rust", 1, 5)

    assert page.total == 1
    assert page.rows[0]["board"]["name"] == "Rust"


def test_get_and_update_missing_post_raise_not_found(service: PostService) -> None:
    with pytest.raises(NotFoundError):
        service.get_post(1)
    with pytest.raises(NotFoundError):
        service.update_post(1, {"title": "New"})
