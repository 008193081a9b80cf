# apps/results_page/directory.py
"""
Bundled event and user catalogs.

These back the lookup dialogs until SELECTOR_DIRECTORIES points at a real
source. Each callable returns the full catalog in its natural order.
"""

EVENTS = [
    {'eventno': '1', 'eventname': '春季交流会 2024'},
    {'eventno': '2', 'eventname': 'Summer Hackathon'},
    {'eventno': '3', 'eventname': '秋季交流会 2024'},
    {'eventno': '4', 'eventname': 'Winter Workshop'},
    {'eventno': '5', 'eventname': '年末ライブ配信'},
]

USERS = [
    {'userno': '101', 'username': '田中 太郎'},
    {'userno': '102', 'username': '鈴木 一郎'},
    {'userno': '201', 'username': '佐藤 花子'},
    {'userno': '202', 'username': 'Alice Walker'},
    {'userno': '301', 'username': '田中 次郎'},
]


def list_events():
    return [dict(event) for event in EVENTS]


def list_users():
    return [dict(user) for user in USERS]
