import pytest
import respx
from httpx import Response
from monday_client import GraphQLEnum, ItemsPage
from monday_client.errors import AuthorizationError

API_URL = "https://api.monday.com/v2"


def test_query_defaults(client, api):
    resp = client.board.query()

    assert api.query() == "query{boards{id name description}}"
    assert resp.status == 200
    assert resp.headers["x-test"] == "1"


def test_query_with_args_and_select(client, api):
    client.board.query(args={"ids": [123]}, select=["id", {"groups": ["id", "title"]}])

    assert api.query() == "query{boards(ids: [123]){id groups { id title }}}"


def test_create(client, api):
    client.board.create(args={"board_name": "New test board", "board_kind": "private"})

    assert api.query() == (
        'mutation{create_board(board_name: "New test board", board_kind: private)'
        "{id name description}}"
    )


def test_duplicate(client, api):
    client.board.duplicate(
        args={"board_id": 1, "duplicate_type": "duplicate_board_with_structure"}
    )

    assert api.query() == (
        "mutation{duplicate_board(board_id: 1, "
        "duplicate_type: duplicate_board_with_structure){board{id name description}}}"
    )


def test_update(client, api):
    client.board.update(
        args={
            "board_id": 1,
            "board_attribute": "description",
            "new_value": "New description",
        }
    )

    assert api.query() == (
        "mutation{update_board(board_id: 1, board_attribute: description, "
        'new_value: "New description")}'
    )


def test_archive_and_delete(client, api):
    client.board.archive(1)
    assert api.query() == "mutation{archive_board(board_id: 1){id}}"

    client.board.delete(1, select=["id", "name"])
    assert api.query() == "mutation{delete_board(board_id: 1){id name}}"


def test_delete_subscribers_is_deprecated(client, api):
    with pytest.warns(DeprecationWarning, match="delete_subscribers"):
        client.board.delete_subscribers(1, [2, 3])

    assert api.query() == (
        "mutation{delete_subscribers_from_board(board_id: 1, user_ids: [2, 3]){id}}"
    )


def test_items_page_first_page(client, api):
    client.board.items_page(123)

    assert api.query() == (
        "query{boards(ids: [123]){items_page(limit: 25){cursor items{id name}}}}"
    )


def test_items_page_cursor_and_filters(client, api):
    client.board.items_page(
        [1, 2],
        limit=50,
        cursor="abc",
        query_params={
            "rules": [{"column_id": "status", "compare_value": [1]}],
            "operator": GraphQLEnum("and"),
        },
        select=["id", "name", {"column_values": ["id", "text"]}],
    )

    assert api.query() == (
        'query{boards(ids: [1, 2]){items_page(limit: 50, cursor: "abc", '
        'query_params: {rules: [{column_id: "status", compare_value: [1]}], operator: and})'
        "{cursor items{id name column_values { id text }}}}}"
    )


@respx.mock
def test_caller_driven_pagination(client):
    pages = [
        {"data": {"boards": [{"items_page": {"cursor": "next", "items": [{"id": "1", "name": "A"}]}}]}},
        {"data": {"boards": [{"items_page": {"cursor": None, "items": [{"id": "2", "name": "B"}]}}]}},
    ]
    route = respx.post(API_URL).mock(
        side_effect=[Response(200, json=page) for page in pages]
    )

    cursor = None
    names = []
    while True:
        page = ItemsPage.from_response(client.board.items_page(9, cursor=cursor))
        names.extend(item.name for item in page.items)
        if not page.has_more:
            break
        cursor = page.cursor

    assert names == ["A", "B"]
    assert route.call_count == 2


@respx.mock
def test_unauthenticated_request(client):
    respx.post(API_URL).mock(
        return_value=Response(401, json={"errors": [{"message": "Not Authenticated"}]})
    )

    with pytest.raises(AuthorizationError):
        client.board.query()
