import math
import os

import gymnasium as gym
import numpy as np
import pygame
from gymnasium.spaces import Box, MultiDiscrete

from snake_sim.controls import direction_from_action
from snake_sim.organism import Collision
from snake_sim.renderer import draw_snapshot, surface_to_array
from snake_sim.session import GameSession

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class GameEnv(gym.Env):
    metadata = {"render_modes": ["rgb_array"]}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: Use the arrow keys or WASD to steer the snake. "
        "The snake cannot turn straight back on itself."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "A classic snake game on a wrapping grid. Eat the blue food to grow, "
        "and avoid running into your own body."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    # --- Constants ---
    GRID_WIDTH = GameSession.GRID_WIDTH
    GRID_HEIGHT = GameSession.GRID_HEIGHT
    CELL_SIZE = 25
    FRAMES_PER_SECOND = GameSession.FRAMES_PER_SECOND

    MAX_STEPS = 1000

    REWARD_FOOD = 1.0
    REWARD_DEATH = -1.0

    def __init__(self, render_mode="rgb_array", grid_width=None, grid_height=None, cell_size=None):
        super().__init__()

        self.render_mode = render_mode
        self.grid_width = self.GRID_WIDTH if grid_width is None else grid_width
        self.grid_height = self.GRID_HEIGHT if grid_height is None else grid_height
        self.cell_size = self.CELL_SIZE if cell_size is None else cell_size
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")

        self.screen_width = self.grid_width * self.cell_size
        self.screen_height = self.grid_height * self.cell_size

        # EXACT spaces:
        self.observation_space = Box(
            low=0, high=255, shape=(self.screen_height, self.screen_width, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # Pygame setup
        pygame.init()
        self.screen = pygame.Surface((self.screen_width, self.screen_height))

        # State variables are initialized in reset()
        self.session = None
        self.clock_ms = 0
        self.steps = 0
        self.food_eaten = 0
        self.terminated = False

        self.reset()
        self.validate_implementation()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.session = GameSession(
            rng=self.np_random,
            now=0,
            grid_width=self.grid_width,
            grid_height=self.grid_height,
            frames_per_second=self.FRAMES_PER_SECOND,
        )
        self.clock_ms = 0
        self.steps = 0
        self.food_eaten = 0
        self.terminated = False

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.terminated:
            return self._get_observation(), 0.0, True, False, self._get_info()

        # --- Action Processing ---
        # Only the movement component is used; 0 keeps the current heading
        self.session.set_direction_intent(direction_from_action(action[0]))

        # --- Game Logic ---
        # Advance the synthetic clock by a whole frame so every step is a tick
        self.clock_ms += math.ceil(self.session.frame_interval)
        self.session.tick(self.clock_ms)
        self.steps += 1

        reward = 0.0
        outcome = self.session.organism.pending_collision
        if outcome is Collision.ATE_FOOD:
            self.food_eaten += 1
            reward += self.REWARD_FOOD
        elif outcome is Collision.HIT_SELF:
            reward += self.REWARD_DEATH

        self.terminated = self.session.game_over
        truncated = not self.terminated and self.steps >= self.MAX_STEPS

        return (
            self._get_observation(),
            reward,
            self.terminated,
            truncated,
            self._get_info()
        )

    def _get_observation(self):
        draw_snapshot(self.screen, self.session.snapshot(), self.cell_size)
        return surface_to_array(self.screen)

    def _get_info(self):
        return {
            "length": self.session.organism.length,
            "steps": self.steps,
            "food_eaten": self.food_eaten,
        }

    def render(self):
        if self.render_mode == "rgb_array":
            return self._get_observation()

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this at the end of __init__ to verify implementation:
        '''
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.screen_height, self.screen_width, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.screen_height, self.screen_width, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.screen_height, self.screen_width, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        # Test growth: food directly in front of a right-facing head
        self.reset()
        organism = self.session.organism
        initial_length = organism.length
        self.session.food.position = organism.head.position.moved(
            organism.facing, self.grid_width, self.grid_height
        )
        _, reward, _, _, info = self.step(np.array([0, 0, 0]))
        assert info["length"] == initial_length + 1
        assert reward == self.REWARD_FOOD

        self.reset()
        print("✓ Implementation validated successfully")


# Example of how to run the environment
if __name__ == '__main__':
    env = GameEnv(render_mode="rgb_array")
    obs, info = env.reset(seed=0)
    terminated = truncated = False
    total_reward = 0.0

    while not (terminated or truncated):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        total_reward += reward

    print(f"Episode finished: length {info['length']}, steps {info['steps']}, reward {total_reward}")
    env.close()
