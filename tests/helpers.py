# tests/helpers.py

import json
import os
from io import BytesIO

from finalsboard.models import ALL_PLATFORMS, Player
from finalsboard.ranks import label_for


def make_player(league_number: int = 20, cashouts=0, name: str = 'Player#0001',
                rank: int = 1, source_platform: str = 'crossplay',
                steam_name: str = '', xbox_name: str = '', psn_name: str = '') -> Player:
    """Build a player record the way the API client would."""
    return Player.from_api(
        make_record(league_number=league_number, cashouts=cashouts, name=name, rank=rank,
                    steam_name=steam_name, xbox_name=xbox_name, psn_name=psn_name),
        source_platform,
    )


def make_record(league_number: int = 20, cashouts=0, name: str = 'Player#0001',
                rank: int = 1, steam_name: str = '', xbox_name: str = '',
                psn_name: str = '') -> dict:
    """Raw API record as found in the ``data`` array."""
    label = label_for(league_number)
    return {
        'rank': rank,
        'change': 0,
        'leagueNumber': league_number,
        'league': label if isinstance(label, str) else '',
        'name': name,
        'steamName': steam_name,
        'xboxName': xbox_name,
        'psnName': psn_name,
        'cashouts': cashouts,
    }


def make_payload(platform: str, records: list) -> dict:
    return {
        'meta': {
            'leaderboardVersion': 'season2',
            'leaderboardPlatform': platform,
            'returnRawData': False,
            'returnCountOnly': False,
        },
        'count': len(records),
        'data': records,
    }


def platform_payloads(size: int = 3) -> dict:
    """One small leaderboard payload per platform, keyed by platform."""
    payloads = {}
    for offset, platform in enumerate(ALL_PLATFORMS):
        records = [
            make_record(
                league_number=20 - offset,
                cashouts=(i + 1) * 100,
                name=f'{platform}#{i:04d}',
                rank=i + 1,
                steam_name=f'{platform}_{i}' if platform == 'steam' else '',
                xbox_name=f'{platform}_{i}' if platform == 'xbox' else '',
                psn_name=f'{platform}_{i}' if platform == 'psn' else '',
            )
            for i in range(size)
        ]
        payloads[platform] = make_payload(platform, records)
    return payloads


def json_response(payload: dict) -> BytesIO:
    return BytesIO(json.dumps(payload).encode('utf-8'))


def load_fixture(filename: str) -> dict:
    path = os.path.join(os.path.dirname(__file__), 'fixtures', filename)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
