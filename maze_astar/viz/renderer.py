import pygame

from maze_astar.core.geometry import Direction, Point
from maze_astar.core.maze import Maze
from maze_astar.config import DEFAULT_RENDER_CONFIG, RenderConfig
from maze_astar.viz.recorder import VideoRecorder


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_EXPLORED = (60, 100, 160)  # Blue tint
    COLOR_FRONTIER = (160, 70, 70)   # Red tint
    COLOR_SOLUTION = (255, 215, 0)   # Gold
    COLOR_START = (80, 200, 120)
    COLOR_END = (220, 80, 200)

    def __init__(self, maze: Maze, solver=None, config: RenderConfig = DEFAULT_RENDER_CONFIG):
        self.maze = maze
        self.solver = solver
        self.config = config
        self.screen_width = config.width
        self.screen_height = config.height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = VideoRecorder(active=config.record, fps=config.record_fps)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.solve_finished = False
        self.status = "Idle"
        self.solver_iter = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.maze.width, available_h / self.maze.height)

        self.offset_x = (self.screen_width - self.maze.width * self.cell_size) / 2
        self.offset_y = (self.screen_height - self.maze.height * self.cell_size) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze A* - {self.maze.width}x{self.maze.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.5, min(200.0, self.cell_size))

                # Keep the cell under the mouse in place
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def visible_range(self):
        start_x = max(0, int(-self.offset_x / self.cell_size))
        start_y = max(0, int(-self.offset_y / self.cell_size))
        end_x = min(self.maze.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.maze.height, int((self.screen_height - self.offset_y) / self.cell_size) + 1)
        return start_x, start_y, end_x, end_y

    def fill_cell(self, point, color, bounds):
        start_x, start_y, end_x, end_y = bounds
        x, y = point
        if start_x <= x < end_x and start_y <= y < end_y:
            sx, sy = self.world_to_screen(x, y)
            size = int(self.cell_size) + 1
            pygame.draw.rect(self.surface, color, (int(sx), int(sy), size, size))

    def draw_search(self, bounds):
        if not self.solver:
            return

        if self.solver.nodes is not None:
            for node in self.solver.nodes:
                self.fill_cell(node.point, self.COLOR_EXPLORED, bounds)

        frontier = getattr(self.solver, "frontier", None)
        if frontier is not None:
            for node in frontier:
                self.fill_cell(node.point, self.COLOR_FRONTIER, bounds)

        for point in self.solver.path:
            self.fill_cell(point, self.COLOR_SOLUTION, bounds)

    def draw_walls(self, bounds):
        start_x, start_y, end_x, end_y = bounds
        size = int(self.cell_size) + 1

        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                directions = self.maze.get_directions(Point(x, y))
                px, py = self.world_to_screen(x, y)
                px, py = int(px), int(py)

                # Each cell owns its north and west walls, the border cells
                # also draw the outer south and east walls.
                if not directions & Direction.NORTH:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                if not directions & Direction.WEST:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 1)
                if y == self.maze.height - 1 and not directions & Direction.SOUTH:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                if x == self.maze.width - 1 and not directions & Direction.EAST:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)

    def draw_maze(self):
        self.surface.fill(self.COLOR_BG)
        bounds = self.visible_range()

        self.draw_search(bounds)
        self.fill_cell(self.maze.start, self.COLOR_START, bounds)
        self.fill_cell(self.maze.end, self.COLOR_END, bounds)

        if self.cell_size > 4.0:
            self.draw_walls(bounds)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        expanded = self.solver.expanded_count if self.solver else 0
        info = [
            f"FPS: {fps}",
            f"Size: {self.maze.width}x{self.maze.height}",
            f"Zoom: {self.cell_size:.2f}",
            f"Expanded: {expanded}",
            f"Status: {self.status}",
            "REC" if self.recorder.active else "",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step_solver(self):
        if self.solver_iter is None or self.solve_finished:
            return
        try:
            for _ in range(self.config.steps_per_frame):
                self.status = next(self.solver_iter)
        except StopIteration:
            self.solve_finished = True
            self.solver_iter = None

    def render_frame(self):
        self.draw_maze()
        self.draw_hud()

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.step_solver()

            self.render_frame()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(self.config.fps)

        self.recorder.stop()
        pygame.quit()
