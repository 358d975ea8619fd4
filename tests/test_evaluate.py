from game_2048.evaluate import evaluate_random, simulate_random_game


def test_random_game_is_deterministic():
    assert simulate_random_game(seed=3) == simulate_random_game(seed=3)


def test_random_game_runs_until_stuck():
    stats = simulate_random_game(seed=0)

    assert stats['steps'] < 10000
    assert '0' not in stats['board']
    assert stats['max_tile'] >= 4
    assert stats['max_tile'] & (stats['max_tile'] - 1) == 0


def test_max_steps_limits_game():
    stats = simulate_random_game(seed=0, max_steps=5)

    assert stats['steps'] == 5
    assert stats['moves'] <= 5


def test_evaluate_random_summary():
    stats = evaluate_random(num_episodes=4, seed=10, progress=False)

    assert stats['num_episodes'] == 4
    assert sum(stats['tile_distribution'].values()) == 4
    assert stats['max_tile'] == max(stats['max_tiles'])
    assert min(stats['max_tiles']) <= stats['avg_max_tile'] <= stats['max_tile']
    assert stats['avg_moves'] > 0
