from steam_roast.core.models import GameRecord, LibraryStats, PersonalityTag
from steam_roast.core.personality import classify_personality, describe_personality
from steam_roast.core.stats import aggregate_stats


def classify(*playtimes: int) -> PersonalityTag:
    games = [GameRecord(name=f"G{i}", playtime_minutes=p) for i, p in enumerate(playtimes)]
    return classify_personality(aggregate_stats(games))


def test_empty_library():
    assert classify_personality(aggregate_stats([])) is PersonalityTag.EMPTY


def test_single_game_is_hyperfocus():
    assert classify(6000) is PersonalityTag.HYPERFOCUS


def test_backlog_ratio_beats_butterfly():
    # 8 untouched, 2 at 10h each: share is exactly 50%, backlog 0.8
    assert classify(*([0] * 8 + [600, 600])) is PersonalityTag.COLLECTOR


def test_hyperfocus_wins_over_collector():
    assert classify(*([0] * 9 + [5000])) is PersonalityTag.HYPERFOCUS


def test_butterfly():
    # every game played a little over an hour, average < 2h
    assert classify(70, 80, 90, 100) is PersonalityTag.BUTTERFLY


def test_completionist():
    assert classify(600, 700, 800, 900, 1000) is PersonalityTag.COMPLETIONIST


def test_casual():
    # 3 of 5 played (0.6): neither collector nor completionist
    assert classify(0, 0, 900, 1000, 1100) is PersonalityTag.CASUAL


def test_classifier_is_deterministic_on_equal_stats():
    a = LibraryStats(total_games=4, played_games=2, backlog_games=2, total_playtime_minutes=1000,
                     average_playtime_minutes=250.0, most_played_share_percent=40, played_percent=50)
    b = LibraryStats(**a.model_dump())
    assert classify_personality(a) == classify_personality(b)


def test_every_tag_has_a_description():
    for tag in PersonalityTag:
        assert describe_personality(tag)
