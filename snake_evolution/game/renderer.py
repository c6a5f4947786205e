import pygame

from .direction import Position


class PygameRenderer:
    """Draws game frames in a pygame window"""

    def __init__(self, grid_size, render_delay=10, caption="Snake Evolution"):
        self.grid_size = grid_size
        self.render_delay = render_delay
        self.closed = False

        pygame.init()
        self.width = 600
        self.height = 600
        self.square_size = self.width // self.grid_size
        self.window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()

        # Colors
        self.WHITE = (255, 255, 255)
        self.BLACK = (0, 0, 0)
        self.RED = (255, 0, 0)
        self.GREEN = (0, 255, 0)
        self.GRAY = (128, 128, 128)

    def draw(self, frame):
        """Draw one frame; returns False once the window has been closed"""
        if self.closed:
            return False

        # Handle pygame events to prevent window from becoming unresponsive
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return False

        self.window.fill(self.WHITE)

        # Draw grid lines
        for i in range(self.grid_size + 1):
            pygame.draw.line(self.window, self.GRAY,
                             (i * self.square_size, 0),
                             (i * self.square_size, self.height), 1)
            pygame.draw.line(self.window, self.GRAY,
                             (0, i * self.square_size),
                             (self.width, i * self.square_size), 1)

        # Draw food
        if frame.food is not None:
            rect = pygame.Rect(
                frame.food.x * self.square_size,
                frame.food.y * self.square_size,
                self.square_size,
                self.square_size
            )
            pygame.draw.rect(self.window, self.RED, rect)
            pygame.draw.rect(self.window, self.BLACK, rect, 2)

        # Draw snake, skipping a head that left the grid on the final move
        for position in frame.body:
            if not self._on_grid(position):
                continue
            rect = pygame.Rect(
                position.x * self.square_size,
                position.y * self.square_size,
                self.square_size,
                self.square_size
            )
            # Head is green, body is black
            color = self.GREEN if position == frame.head else self.BLACK
            pygame.draw.rect(self.window, color, rect)
            pygame.draw.rect(self.window, self.GRAY, rect, 2)

        font = pygame.font.Font(None, 36)
        score_text = font.render(f"Score: {frame.score}", True, self.BLACK)
        self.window.blit(score_text, (10, 10))

        steps_text = font.render(f"Steps: {frame.steps}", True, self.BLACK)
        self.window.blit(steps_text, (10, 50))

        pygame.display.flip()

        if self.render_delay > 0:
            self.clock.tick(self.render_delay)
        return True

    def _on_grid(self, position: Position):
        return 0 <= position.x < self.grid_size and 0 <= position.y < self.grid_size

    def close(self):
        """Close the pygame window"""
        if not self.closed:
            pygame.quit()
            self.closed = True
