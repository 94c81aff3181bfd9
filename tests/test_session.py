"""
END-TO-END SESSION TESTS

These tests drive a GameSession the way the frame loop does:
- aliens spawning on the cadence
- aliens falling and being missed
- typed keys destroying aliens
- score counters and the input buffer staying consistent
- resizing the viewport

NO UI DEPENDENCIES - pure gameplay logic testing.
"""
import random

import pytest
from code_invaders.gameplay.session import (
    GameSession, AlienSpawnedEvent, AlienMatchedEvent, AlienMissedEvent
)
from code_invaders.gameplay.words import WordPool
from code_invaders.gameplay.matching import InputState
from code_invaders.gameplay.constants import (
    FLASH_DURATION_MS, MARGIN, SPAWN_INTERVAL_MS
)


def type_word(session, word, now_ms):
    events = []
    for char in word:
        events.extend(session.type_key(char, now_ms))
    return events


class TestSpawning:
    """Tests for spawns driven by tick()."""

    def test_first_tick_spawns(self, make_session, for_while_pool):
        session = make_session(for_while_pool)
        events = session.tick(0.0)

        spawned = [e for e in events if isinstance(e, AlienSpawnedEvent)]
        assert len(spawned) == 1
        assert len(session.aliens) == 1
        assert session.aliens[0].code in ("for", "while")
        assert session.score.spawned == 1

    def test_spawn_cadence(self, make_session, for_while_pool):
        """Frames inside the interval do not spawn."""
        session = make_session(for_while_pool)
        session.tick(0.0)
        session.tick(1000.0)
        session.tick(SPAWN_INTERVAL_MS)
        assert session.score.spawned == 1

        session.tick(SPAWN_INTERVAL_MS + 1)
        assert session.score.spawned == 2

    def test_spawn_ids_follow_order(self, make_session, for_while_pool):
        session = make_session(for_while_pool, height=100000)
        for i in range(4):
            session.tick(i * (SPAWN_INTERVAL_MS + 1))
        assert [a.alien_id for a in session.aliens] == [0, 1, 2, 3]

    def test_spawn_counter_increments_by_one(self, make_session, for_while_pool):
        session = make_session(for_while_pool, height=100000)
        previous = 0
        for i in range(10):
            session.tick(i * 700.0)
            assert session.score.spawned - previous in (0, 1)
            previous = session.score.spawned

    def test_empty_catalog_no_spawn(self, make_session):
        """An empty catalog ticks happily without aliens."""
        session = make_session(WordPool(codes=()))
        events = session.simulate(10000.0)
        assert events == []
        assert session.aliens == []
        assert session.score.spawned == 0


class TestScenario:
    """The for/while walkthrough."""

    def test_for_while_walkthrough(self, text_width):
        pool = WordPool(codes=("for", "while"), fast_speeds={"for": 5.0})
        session = GameSession(pool, 800, 800, text_width, rng=random.Random(0), language="Java")

        session.tick(0.0)
        alien = session.aliens[0]
        assert alien.code in ("for", "while")

        # A slow alien from y=0 survives 100 ticks (y = 150 < 780)
        session.aliens[0].y = 0.0
        session.aliens[0].speed = 1.5
        for i in range(1, 101):
            session.tick(float(i))
        assert len(session.aliens) == 1
        assert session.aliens[0].y == pytest.approx(150.0)

        # Make sure a 'for' alien is live, then type it
        session.aliens[0].code = "for"
        events = type_word(session, "for", 200.0)

        assert any(isinstance(e, AlienMatchedEvent) for e in events)
        assert session.score.matched == 1
        assert session.input_buffer == ""
        assert session.aliens[0].flash_expiry_ms == 200.0 + FLASH_DURATION_MS

    def test_matched_alien_removed_after_flash(self, make_session):
        session = make_session(WordPool(codes=("for",)))
        session.tick(0.0)
        type_word(session, "for", 10.0)

        session.tick(10.0 + FLASH_DURATION_MS)
        assert len(session.aliens) == 1

        session.tick(10.0 + FLASH_DURATION_MS + 1)
        assert session.aliens == []
        assert session.score.matched == 1


class TestMisses:
    """Tests for aliens reaching the bottom."""

    def test_miss_clears_buffer(self, make_session):
        session = make_session(WordPool(codes=("while",)), height=100)
        session.tick(0.0)
        type_word(session, "whi", 5.0)
        assert session.input_state == InputState.ACCUMULATING

        events = session.simulate(2000.0, frame_ms=10.0, start_ms=10.0)

        assert any(isinstance(e, AlienMissedEvent) for e in events)
        assert session.input_buffer == ""
        assert session.input_state == InputState.IDLE

    def test_one_event_per_missed_alien(self, make_session, make_alien):
        """Two aliens landing together give two events and one clear."""
        session = make_session(WordPool(codes=("for",)))
        session.last_spawn_ms = 0.0
        session.aliens = [
            make_alien(alien_id=0, code="for", y=790.0),
            make_alien(alien_id=1, code="do", y=795.0),
            make_alien(alien_id=2, code="if", y=10.0),
        ]
        session.match_engine.buffer = "xy"

        events = session.tick(100.0)

        missed = [e for e in events if isinstance(e, AlienMissedEvent)]
        assert [e.alien.alien_id for e in missed] == [0, 1]
        assert session.input_buffer == ""
        assert [a.alien_id for a in session.aliens] == [2]

    def test_misses_do_not_touch_score(self, make_session):
        session = make_session(WordPool(codes=("while",)), height=60)
        session.simulate(10000.0, frame_ms=50.0)
        assert session.score.matched == 0
        assert session.score.spawned > 0


class TestScoreInvariant:
    """matched never exceeds spawned."""

    def test_random_play(self, text_width):
        rng = random.Random(42)
        pool = WordPool(codes=("a", "b", "ab", "ba"), fast_speeds={"ab": 5.0})
        session = GameSession(pool, 400, 300, text_width, rng=random.Random(1))

        for frame in range(3000):
            now = frame * 16.0
            session.tick(now)
            if rng.random() < 0.3:
                session.type_key(rng.choice(["a", "b", "Shift", "\r"]), now)
            assert session.score.matched <= session.score.spawned


class TestResize:
    """Tests for viewport resizing."""

    def test_halving_width_scales_x(self, make_session, make_alien):
        session = make_session(WordPool(codes=("for",)), width=800)
        session.aliens = [make_alien(alien_id=0, code="for", x=200.0)]

        session.resize(400, 800)

        assert session.aliens[0].x == pytest.approx(100.0)
        assert session.width == 400

    def test_resize_clamps_right_edge(self, make_session, make_alien, text_width):
        session = make_session(WordPool(codes=("while",)), width=800)
        session.aliens = [make_alien(alien_id=0, code="while", x=740.0)]

        session.resize(400, 800)

        # 370 + 50 > 390, pushed back inside
        assert session.aliens[0].x == pytest.approx(400 - text_width("while") - MARGIN)

    def test_resize_clamps_left_edge(self, make_session, make_alien):
        session = make_session(WordPool(codes=("if",)), width=800)
        session.aliens = [make_alien(alien_id=0, code="if", x=12.0)]

        session.resize(400, 800)

        assert session.aliens[0].x == MARGIN

    def test_resize_updates_height(self, make_session):
        session = make_session(WordPool(codes=("if",)), width=800, height=800)
        session.resize(800, 300)
        assert session.height == 300


class TestForLanguage:
    """Tests for building a session from a language id."""

    def test_builds_pool(self, text_width):
        session = GameSession.for_language("Python", 800, 600, text_width, rng=random.Random(3))
        assert "lambda" in session.pool
        assert session.language == "Python"
        assert len(session.pool.fast_speeds) == 10

    def test_sessions_do_not_share_state(self, text_width):
        one = GameSession.for_language("C#", 800, 600, text_width, rng=random.Random(3))
        two = GameSession.for_language("C#", 800, 600, text_width, rng=random.Random(3))
        one.tick(0.0)
        one.type_key("x", 0.0)
        assert two.aliens == []
        assert two.input_buffer == ""
        assert two.score.spawned == 0
