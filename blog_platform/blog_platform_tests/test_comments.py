from blog_platform.blog_platform.blog_service.db import SessionLocal
from blog_platform.blog_platform.blog_service.models import Comment


def create_post(client, headers, title="T"):
    return client.post("/api/blogs", headers=headers, json={"title": title, "content": "C"}).json()["blog"]["id"]


def add_comment(client, headers, blog_id, content="nice post"):
    return client.post(f"/api/blogs/comments/{blog_id}", headers=headers, json={"content": content})


def test_create_comment(client, make_user, auth_header):
    user_id = make_user("alice")
    headers = auth_header(user_id)
    blog_id = create_post(client, headers)

    response = add_comment(client, headers, blog_id)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Comment added"
    assert body["comment"]["content"] == "nice post"
    assert body["comment"]["authorId"] == user_id
    assert body["comment"]["postId"] == blog_id


def test_create_comment_on_missing_post(client, alice_headers):
    response = add_comment(client, alice_headers, 12345)
    assert response.status_code == 404
    assert response.json() == {"message": "Blog post not found"}


def test_create_comment_requires_content(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    response = client.post(f"/api/blogs/comments/{blog_id}", headers=alice_headers, json={})
    assert response.status_code == 400


def test_list_comments_for_post_with_author(client, alice_headers, bob_headers):
    blog_id = create_post(client, alice_headers)
    other_id = create_post(client, alice_headers, title="other")
    add_comment(client, alice_headers, blog_id, "one")
    add_comment(client, bob_headers, blog_id, "two")
    add_comment(client, bob_headers, other_id, "elsewhere")

    response = client.get(f"/api/blogs/comments/{blog_id}")
    assert response.status_code == 200
    comments = response.json()["comments"]
    assert [c["content"] for c in comments] == ["one", "two"]
    assert [c["author"]["username"] for c in comments] == ["alice", "bob"]


def test_update_comment(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    comment_id = add_comment(client, alice_headers, blog_id).json()["comment"]["id"]

    response = client.put(
        f"/api/blogs/comments/{blog_id}/{comment_id}", headers=alice_headers, json={"content": "edited"}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Comment updated successfully"
    assert response.json()["comment"]["content"] == "edited"


def test_update_comment_without_content_keeps_it(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    comment_id = add_comment(client, alice_headers, blog_id).json()["comment"]["id"]

    response = client.put(f"/api/blogs/comments/{blog_id}/{comment_id}", headers=alice_headers, json={})
    assert response.status_code == 200
    assert response.json()["comment"]["content"] == "nice post"


def test_update_comment_missing_post_or_comment(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    comment_id = add_comment(client, alice_headers, blog_id).json()["comment"]["id"]

    missing_post = client.put(f"/api/blogs/comments/999/{comment_id}", headers=alice_headers, json={"content": "x"})
    assert missing_post.status_code == 404
    assert missing_post.json() == {"message": "Blog post not found"}

    missing_comment = client.put(f"/api/blogs/comments/{blog_id}/999", headers=alice_headers, json={"content": "x"})
    assert missing_comment.status_code == 404
    assert missing_comment.json() == {"message": "Comment not found"}


def test_comment_must_belong_to_post(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    other_id = create_post(client, alice_headers, title="other")
    comment_id = add_comment(client, alice_headers, blog_id).json()["comment"]["id"]

    update = client.put(f"/api/blogs/comments/{other_id}/{comment_id}", headers=alice_headers, json={"content": "x"})
    delete = client.delete(f"/api/blogs/comments/{other_id}/{comment_id}", headers=alice_headers)
    assert update.status_code == delete.status_code == 404

    listed = client.get(f"/api/blogs/comments/{blog_id}").json()["comments"]
    assert listed[0]["content"] == "nice post"


def test_delete_comment(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    comment_id = add_comment(client, alice_headers, blog_id).json()["comment"]["id"]

    response = client.delete(f"/api/blogs/comments/{blog_id}/{comment_id}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Comment deleted successfully"}

    again = client.delete(f"/api/blogs/comments/{blog_id}/{comment_id}", headers=alice_headers)
    assert again.status_code == 404


def test_deleting_post_deletes_its_comments(client, alice_headers):
    blog_id = create_post(client, alice_headers)
    add_comment(client, alice_headers, blog_id, "one")
    add_comment(client, alice_headers, blog_id, "two")

    assert client.delete(f"/api/blogs/{blog_id}", headers=alice_headers).status_code == 200

    db = SessionLocal()
    try:
        assert db.query(Comment).filter(Comment.post_id == blog_id).count() == 0
    finally:
        db.close()
    assert client.get(f"/api/blogs/comments/{blog_id}").json()["comments"] == []
