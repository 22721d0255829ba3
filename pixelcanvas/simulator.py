"""Pygame preview window. Shows canvas snapshots upscaled to be visible."""

import pygame

from pixelcanvas import config
from pixelcanvas.snapshot import Snapshot


class Simulator:
    """Opens a window that displays snapshots, upscaled by an integer factor."""

    def __init__(self, width: int, height: int, scale: int = config.SCALE,
                 title: str = "Pixel Canvas"):
        self.scale = scale
        self.width = width * scale
        self.height = height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        print(f"[sim] {width}x{height} canvas at {scale}x in '{title}'")

    def update(self, snapshot: Snapshot) -> bool:
        """Blit a snapshot to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        # Snapshot bytes are already top-down RGB, the layout pygame expects
        surface = pygame.image.frombuffer(snapshot.data, (snapshot.width, snapshot.height), "RGB")
        self.screen.blit(pygame.transform.scale(surface, (self.width, self.height)), (0, 0))
        pygame.display.flip()
        return True

    def tick(self, fps: int = config.FPS) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
