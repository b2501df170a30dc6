"""
test_game_session.py
--------------------
Regression tests for the session state machine and its tick loop.

Covers:
1. Start, difficulty selection and enemy spawning on schedule
2. Scoring from bullet kills
3. Life loss from health depletion and game over
4. High score persistence
5. Escapes versus contact damage
6. Idempotent teardown and restart
"""

import json

import pytest

from skyguard.core.runtime.difficulty import DifficultyLevel
from skyguard.core.runtime.game_session import GameSession
from skyguard.core.runtime.session_state import SessionState
from skyguard.core.services.event_manager import (
    GameOverEvent,
    LifeLostEvent,
    PlayerHitEvent,
    SessionStartedEvent,
)
from skyguard.entities.bullets.bullet_straight import Bullet


# ===========================================================
# Start
# ===========================================================

class TestSessionStart:

    def test_new_session_is_idle(self, session):
        assert session.state is SessionState.IDLE
        assert not session.running
        assert session.player is None
        assert not session.ticking

    def test_start_enters_running_with_fresh_state(self, session, mock_sound, manual_scheduler):
        assert session.start("easy") is True

        assert session.state is SessionState.RUNNING
        assert session.difficulty is DifficultyLevel.EASY
        assert session.score == 0
        assert session.player.lives == 3
        assert session.player.health == 100
        assert session.bullets == [] and session.enemies == []
        assert session.ticking
        assert manual_scheduler.active_timer_count() == 1
        mock_sound.play.assert_any_call("game_start")

    def test_start_runs_first_tick_and_renders(self, session, mock_renderer):
        session.start(DifficultyLevel.HARD)
        assert session.tick_count == 1
        mock_renderer.draw_world.assert_called_once_with(session)

    def test_start_dispatches_event(self, session, events):
        received = []
        events.subscribe(SessionStartedEvent, received.append)
        session.start("Medium")
        assert received == [SessionStartedEvent(difficulty="medium")]

    def test_unknown_difficulty_raises(self, session):
        with pytest.raises(ValueError):
            session.start("nightmare")
        assert session.state is SessionState.IDLE

    def test_start_while_running_is_ignored(self, running_session, manual_scheduler):
        running_session.score = 30
        assert running_session.start("hard") is False
        assert running_session.difficulty is DifficultyLevel.EASY
        assert running_session.score == 30
        assert manual_scheduler.active_timer_count() == 1

    def test_scenario_easy_spawn_after_one_interval(self, running_session, manual_scheduler):
        before = len(running_session.enemies)
        manual_scheduler.advance(1500)

        assert len(running_session.enemies) == before + 1
        enemy = running_session.enemies[-1]
        assert enemy.y == -40
        assert enemy.speed == 2


# ===========================================================
# Tick Loop
# ===========================================================

class TestTickLoop:

    def test_each_frame_runs_one_tick(self, running_session, manual_scheduler):
        for _ in range(5):
            manual_scheduler.step_frame()
        assert running_session.tick_count == 6

    def test_loop_stops_after_game_over(self, running_session, manual_scheduler):
        running_session.game_over()
        ticks = running_session.tick_count

        manual_scheduler.run_for(1000)

        assert running_session.tick_count == ticks
        assert not manual_scheduler.has_pending_frame()

    def test_enemies_fall_and_escape_over_time(self, running_session, manual_scheduler):
        # Easy: 2 px per tick, one spawn every 1.5 s
        manual_scheduler.run_for(1500, frame_ms=10)
        assert len(running_session.enemies) == 1

        # First enemy has either escaped or hit the player; two more have spawned
        manual_scheduler.run_for(3500, frame_ms=10)
        player = running_session.player
        assert (player.lives, player.health) in {(2, 100), (3, 80)}
        assert len(running_session.enemies) == 2


# ===========================================================
# Scoring
# ===========================================================

class TestScoring:

    def test_scenario_bullet_kill_scores_ten(self, running_session, place_enemy):
        running_session.bullets.append(Bullet(100, 60))
        place_enemy(running_session, 98, 53)

        running_session.tick()

        assert running_session.bullets == []
        assert running_session.enemies == []
        assert running_session.score == 10

    def test_fire_spawns_bullet_and_plays_cue(self, running_session, mock_sound):
        bullet = running_session.fire()

        assert running_session.bullets == [bullet]
        assert bullet.y == running_session.player.y
        mock_sound.play.assert_any_call("shoot")

    def test_fire_ignored_unless_running(self, session):
        assert session.fire() is None
        assert session.bullets == []

    def test_score_is_non_decreasing_multiple_of_ten(self, running_session, place_enemy):
        history = [running_session.score]
        for x in (100, 300, 500):
            running_session.bullets.append(Bullet(x + 2, 60))
            place_enemy(running_session, x, 53)
            running_session.tick()
            history.append(running_session.score)

        assert history == sorted(history)
        assert all(score % 10 == 0 and score >= 0 for score in history)
        assert history[-1] == 30


# ===========================================================
# Damage, Lives & Game Over
# ===========================================================

class TestDamageAndLives:

    def test_contact_reduces_health(self, running_session, enemy_on_player, events):
        hits = []
        events.subscribe(PlayerHitEvent, hits.append)
        enemy_on_player(running_session)

        running_session.tick()

        assert running_session.player.health == 80
        assert hits == [PlayerHitEvent(damage=20, health=80)]

    def test_health_stays_within_bounds_after_each_tick(self, running_session, enemy_on_player):
        running_session.player.lives = 5
        for _ in range(12):
            enemy_on_player(running_session)
            running_session.tick()
            assert 0 <= running_session.player.health <= 100

    def test_scenario_last_life_contact_ends_game(self, running_session, enemy_on_player, events, mock_sound):
        over = []
        events.subscribe(GameOverEvent, over.append)
        running_session.player.lives = 1
        running_session.player.health = 20
        enemy_on_player(running_session)

        running_session.tick()

        assert running_session.state is SessionState.GAME_OVER
        assert running_session.player.lives == 0
        assert running_session.player.health == 0
        assert len(over) == 1
        mock_sound.stop_all.assert_called_once()
        mock_sound.play.assert_called_with("game_over")

    def test_final_hit_is_reported_before_game_over(self, running_session, enemy_on_player, events):
        order = []
        events.subscribe(PlayerHitEvent, lambda e: order.append(("hit", e.health)))
        events.subscribe(LifeLostEvent, lambda e: order.append(("life", e.lives)))
        events.subscribe(GameOverEvent, lambda e: order.append(("over",)))
        running_session.player.lives = 1
        running_session.player.health = 20
        enemy_on_player(running_session)

        running_session.tick()

        assert order == [("hit", 0), ("life", 0), ("over",)]

    def test_depleting_hit_reports_restored_health(self, running_session, enemy_on_player, events):
        hits = []
        events.subscribe(PlayerHitEvent, hits.append)
        running_session.player.health = 20
        enemy_on_player(running_session)

        running_session.tick()

        assert hits == [PlayerHitEvent(damage=20, health=100)]
        assert running_session.player.lives == 2

    def test_scenario_escape_overlapping_player_costs_one_life(self, running_session, place_enemy, events):
        lost = []
        events.subscribe(LifeLostEvent, lost.append)
        player = running_session.player
        running_session.viewport_height = player.y + 1
        place_enemy(running_session, player.x, player.y, speed=2)

        running_session.tick()

        assert player.lives == 2
        assert player.health == 100
        assert lost == [LifeLostEvent(lives=2, cause="escape")]

    def test_game_over_is_idempotent(self, running_session, events, mock_sound):
        over = []
        events.subscribe(GameOverEvent, over.append)

        running_session.game_over()
        running_session.game_over()

        assert len(over) == 1
        assert mock_sound.stop_all.call_count == 1


# ===========================================================
# High Score
# ===========================================================

class TestHighScore:

    def test_scenario_new_high_score_is_stored(self, running_session, high_score_store):
        high_score_store.set(100)
        running_session.score = 150

        running_session.game_over()

        assert running_session.high_score == 150
        assert running_session.new_high_score is True
        assert high_score_store.get() == 150
        assert running_session.last_result.new_high_score is True

    def test_scenario_lower_score_keeps_stored_value(self, running_session, high_score_store):
        high_score_store.set(100)
        running_session.score = 80

        running_session.game_over()

        assert running_session.high_score == 100
        assert running_session.new_high_score is False
        with open(high_score_store.path, encoding="utf-8") as f:
            assert json.load(f) == {"highScore": 100}

    def test_equal_score_is_not_a_new_record(self, running_session, high_score_store):
        high_score_store.set(100)
        running_session.score = 100
        running_session.game_over()
        assert running_session.new_high_score is False

    def test_high_score_loaded_at_construction(self, high_score_store, manual_scheduler):
        high_score_store.set(70)
        session = GameSession(manual_scheduler, high_score_store=high_score_store,
                              difficulty_table=None)
        assert session.high_score == 70


# ===========================================================
# Teardown & Restart
# ===========================================================

class TestTeardownAndRestart:

    def test_stop_twice_equals_once(self, running_session, manual_scheduler):
        running_session.stop()
        running_session.stop()

        assert manual_scheduler.active_timer_count() == 0
        assert not manual_scheduler.has_pending_frame()
        assert not running_session.ticking

    def test_restart_only_from_game_over(self, running_session):
        assert running_session.restart() is False
        running_session.game_over()
        assert running_session.restart() is True
        assert running_session.state is SessionState.IDLE

    def test_restart_then_start_resets_session(self, running_session, manual_scheduler, place_enemy):
        running_session.score = 40
        place_enemy(running_session, 10, 10)
        running_session.player.lives = 1
        running_session.game_over()
        running_session.restart()

        assert running_session.start("hard") is True
        assert running_session.score == 0
        assert running_session.enemies == []
        assert running_session.player.lives == 3
        assert running_session.ticking
        assert manual_scheduler.active_timer_count() == 1

        manual_scheduler.step_frame()
        assert running_session.tick_count == 2

    def test_restart_releases_held_input(self, running_session):
        running_session.input_state.move_left = True
        running_session.game_over()
        running_session.restart()
        assert not running_session.input_state.move_left

    def test_toggle_mute_delegates_to_sound(self, session, mock_sound):
        assert session.toggle_mute() is True
        mock_sound.toggle_mute.assert_called_once()
