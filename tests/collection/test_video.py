from datetime import datetime

from mytube.collection.model import new_video


def _video(**overrides):
    fields = dict(
        id="v1",
        video_id="dQw4w9WgXcQ",
        title="Title",
        description="Desc",
        channel_name="Channel",
        channel_icon_url="https://example.com/icon.png",
        channel_url="https://example.com/c",
        favorite=False,
        created_at=datetime(2024, 5, 1, 10, 0, 0),
        updated_at=datetime(2024, 5, 2, 11, 30, 0),
    )
    fields.update(overrides)
    return new_video(**fields)


def test_new_video_is_not_deleted():
    video = _video()

    assert video.deleted_at is None
    assert not video.is_deleted


def test_favorite_toggles():
    video = _video()

    video.favorite_video()
    assert video.favorite is True

    video.unfavorite()
    assert video.favorite is False


def test_soft_delete_sets_timestamp():
    video = _video()
    at = datetime(2024, 6, 1, 8, 0, 0)

    video.soft_delete(at)

    assert video.is_deleted
    assert video.deleted_at == at


def test_str_renders_empty_deleted_at():
    text = str(_video(favorite=True))

    assert text == (
        "ID : v1\tVideoID : dQw4w9WgXcQ\tTitle : Title\tDescription : Desc\t"
        "ChannelName : Channel\tChannelIconURL : https://example.com/icon.png\t"
        "ChannelURL : https://example.com/c\tFab : true\t"
        "CreatedAt : 2024-05-01 10:00:00\tUpdatedAt : 2024-05-02 11:30:00\tDeletedAt : <empty>"
    )


def test_str_renders_deleted_at():
    video = _video()
    video.soft_delete(datetime(2024, 6, 1, 8, 0, 0))

    assert str(video).endswith("DeletedAt : 2024-06-01 08:00:00")
