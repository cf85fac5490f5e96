from mindpulse.models.group import Group, VibeLog
from mindpulse.utils.date_utils import today_str, days_ago_str
from mindpulse.utils.schedulers.vibe_history_cleaner import clean_old_vibe_logs


def test_old_vibe_logs_removed_counter_kept(db):
    db.add(Group(group_id="TEAM1", vibes=3))
    db.add_all([
        VibeLog(group_id="TEAM1", user_id="u1", date=days_ago_str(45)),
        VibeLog(group_id="TEAM1", user_id="u2", date=days_ago_str(31)),
        VibeLog(group_id="TEAM1", user_id="u1", date=today_str()),
    ])
    db.commit()

    deleted = clean_old_vibe_logs(retention_days=30)

    db.expire_all()
    assert deleted == 2
    assert [v.date for v in db.query(VibeLog).all()] == [today_str()]
    assert db.query(Group).one().vibes == 3
