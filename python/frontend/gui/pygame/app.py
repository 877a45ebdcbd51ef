"""Pygame GUI frontend — fully self-contained.

Includes main menu, play and study modes and a win screen.  Click a piece
to select it, then slide it with the arrow keys or WASD.
"""

from __future__ import annotations

import enum

import pygame

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import DEFAULT_CONFIG, Solver, SolverConfig
from backend.models.board import HEIGHT, WIDTH, Board, Tile
from backend.models.coordinate import Coordinate, Direction

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_PINK = (245, 194, 231)
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)
COL_PEACH = (250, 179, 135)

PIECE_COLOURS: dict[Tile, tuple[int, int, int]] = {
    Tile.SQUARE: COL_RED,
    Tile.TOPLEFT: COL_BLUE,
    Tile.TOPRIGHT: COL_GREEN,
    Tile.BOTTOMLEFT: COL_YELLOW,
    Tile.BOTTOMRIGHT: COL_PINK,
}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 560, 520
CELL = 80
CELL_GAP = 4
BOARD_W = WIDTH * CELL
BOARD_H = HEIGHT * CELL
BOARD_X = (WIN_W - BOARD_W) // 2
BOARD_Y = 70

_KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

_KEY_TILES: dict[int, Tile] = {
    pygame.K_1: Tile.SQUARE,
    pygame.K_2: Tile.TOPLEFT,
    pygame.K_3: Tile.TOPRIGHT,
    pygame.K_4: Tile.BOTTOMLEFT,
    pygame.K_5: Tile.BOTTOMRIGHT,
}


# ---------------------------------------------------------------------------
# Screen enum
# ---------------------------------------------------------------------------
class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    WIN = "win"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "radius", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
        radius: int = 8,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.radius = radius
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=self.radius)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _cell_rect(cell: Coordinate) -> pygame.Rect:
    return pygame.Rect(
        BOARD_X + cell.col * CELL + CELL_GAP // 2,
        BOARD_Y + cell.row * CELL + CELL_GAP // 2,
        CELL - CELL_GAP,
        CELL - CELL_GAP,
    )


def cell_at(pos: tuple[int, int]) -> Coordinate | None:
    """Return the board cell under a window position, if any."""
    x, y = pos
    if not (BOARD_X <= x < BOARD_X + BOARD_W and BOARD_Y <= y < BOARD_Y + BOARD_H):
        return None
    return Coordinate((y - BOARD_Y) // CELL, (x - BOARD_X) // CELL)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: SolverConfig) -> None:
        self._config = config

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Corner Slide")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.MENU
        self._game: GamePlay | None = None
        self._selected = Tile.SQUARE
        self._study_mode = False
        self._status_msg = ""

        self._build_menu_btns()
        self._build_game_btns()
        self._build_win_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw = 220
        self._play_btn = _Btn(
            (_cx(bw), 300, bw, 50), "P L A Y", self._f_btn,
            bg=COL_BLUE, hover=COL_LAVENDER, fg=COL_BASE,
        )
        self._study_btn = _Btn(
            (_cx(bw), 364, bw, 42), "S T U D Y", self._f_btn_sm,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw), 420, bw, 42), "Q U I T", self._f_btn_sm,
            bg=COL_RED, hover=(255, 170, 185), fg=COL_BASE,
        )
        self._menu_all = [self._play_btn, self._study_btn, self._quit_btn]

    def _build_game_btns(self) -> None:
        bw, gap = 120, 10
        y = BOARD_Y + BOARD_H + 16
        sx = _cx(3 * bw + 2 * gap)
        self._restart_btn = _Btn(
            (sx, y, bw, 36), "RESTART (R)", self._f_btn_sm,
            bg=COL_PINK, hover=(245, 210, 227), fg=COL_BASE,
        )
        self._hint_btn = _Btn(
            (sx + bw + gap, y, bw, 36), "HINT (N)", self._f_btn_sm,
            bg=COL_YELLOW, hover=(255, 240, 200), fg=COL_BASE,
        )
        self._solve_btn = _Btn(
            (sx + 2 * (bw + gap), y, bw, 36), "SOLVE (V)", self._f_btn_sm,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._game_btns = [self._restart_btn, self._hint_btn, self._solve_btn]

    def _visible_game_btns(self) -> list[_Btn]:
        # Play mode offers hints only.
        if self._study_mode:
            return self._game_btns
        return [self._restart_btn, self._hint_btn]

    def _build_win_btns(self) -> None:
        bw = 220
        self._win_again = _Btn(
            (_cx(bw), 380, bw, 50), "PLAY AGAIN", self._f_btn,
            bg=COL_GREEN, hover=(190, 240, 190), fg=COL_BASE,
        )
        self._win_menu = _Btn((_cx(bw), 444, bw, 46), "M E N U", self._f_btn_sm)

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_board(self, board: Board, selected: Tile | None) -> None:
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(BOARD_X - 6, BOARD_Y - 6, BOARD_W + 12, BOARD_H + 12),
            border_radius=10,
        )
        f_cell = self._f_title
        for r, row in enumerate(board.grid()):
            for c, tile in enumerate(row):
                rect = _cell_rect(Coordinate(r, c))
                if tile is None:
                    pygame.draw.rect(self._surf, COL_SURFACE0, rect, border_radius=6)
                    continue
                pygame.draw.rect(self._surf, PIECE_COLOURS[tile], rect, border_radius=6)
                if tile == selected:
                    pygame.draw.rect(self._surf, COL_TEXT, rect, width=3, border_radius=6)
                lbl = f_cell.render(str(tile + 1), True, COL_BASE)
                self._surf.blit(
                    lbl,
                    (rect.centerx - lbl.get_width() // 2, rect.centery - lbl.get_height() // 2),
                )

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("CORNER  SLIDE", True, COL_TEXT), 80)
        _blit_center(
            self._surf,
            self._f_body.render("Pull the four corners flush around the square", True, COL_SUBTEXT),
            150,
        )
        for btn in self._menu_all:
            btn.draw(self._surf)

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None

        title, colour = ("Study", COL_YELLOW) if self._study_mode else ("Corner Slide", COL_TEXT)
        _blit_center(self._surf, self._f_title.render(title, True, colour), 14)

        directions = game.legal_directions(self._selected)
        moves = ", ".join(d.value for d in directions) if directions else "none"
        _blit_center(
            self._surf,
            self._f_body.render(f"{self._selected.name}  →  {moves}", True, COL_PEACH),
            42,
        )

        self._draw_board(game.board, self._selected)

        for btn in self._visible_game_btns():
            btn.draw(self._surf)

        footer_y = BOARD_Y + BOARD_H + 62
        if self._status_msg:
            _blit_center(self._surf, self._f_small.render(self._status_msg, True, COL_YELLOW), footer_y)
            footer_y += 20
        _blit_center(
            self._surf,
            self._f_small.render(
                "Click / 1-5  select     Arrows / WASD  move     M  menu",
                True,
                COL_OVERLAY0,
            ),
            footer_y,
        )

    def _draw_win(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        _blit_center(self._surf, self._f_big.render("★  S O L V E D  ★", True, COL_GREEN), 14)
        self._draw_board(game.board, None)
        self._win_again.draw(self._surf)
        self._win_menu.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._play_btn.hit(ev.pos):
                self._start_game()
            elif self._study_btn.hit(ev.pos):
                self._open_study()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_l:
                self._open_study()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._visible_game_btns():
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._restart_btn.hit(ev.pos):
                self._do_restart()
            elif self._hint_btn.hit(ev.pos):
                self._do_hint()
            elif self._study_mode and self._solve_btn.hit(ev.pos):
                self._do_solve()
            else:
                cell = cell_at(ev.pos)
                tile = game.board.tile_at(cell) if cell is not None else None
                if tile is not None:
                    self._selected = tile
                    self._status_msg = ""
        elif ev.type == pygame.KEYDOWN:
            if ev.key in _KEY_DIRECTIONS:
                direction = _KEY_DIRECTIONS[ev.key]
                if game.move(self._selected, direction):
                    self._status_msg = ""
                else:
                    self._status_msg = f"{self._selected.name} cannot move {direction.value}"
            elif ev.key in _KEY_TILES:
                self._selected = _KEY_TILES[ev.key]
            elif ev.key == pygame.K_n:
                self._do_hint()
            elif ev.key == pygame.K_v and self._study_mode:
                self._do_solve()
            elif ev.key == pygame.K_r:
                self._do_restart()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_win(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._win_again.motion(ev.pos)
            self._win_menu.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._win_again.hit(ev.pos):
                self._start_game()
            elif self._win_menu.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── solver actions ──────────────────────────────────────────────────────

    def _do_hint(self) -> None:
        game = self._game
        assert game is not None
        hint = Solver.hint(game.board, self._config)
        if hint is None:
            self._status_msg = (
                "Already solved!" if game.board.is_goal()
                else "No hint within the search limits"
            )
        else:
            self._status_msg = f"Hint: {hint}"
            game.apply(hint)

    def _do_solve(self) -> None:
        game = self._game
        assert game is not None
        moves = Solver.solve(game.board, self._config)
        if not moves:
            self._status_msg = (
                "Already solved!" if game.board.is_goal()
                else "No solution within the search limits"
            )
            return
        for move in moves:
            game.apply(move)

    def _do_restart(self) -> None:
        if self._study_mode:
            self._attach(GamePlay.from_board(GameGenerator.generate()))
            self._status_msg = "Scrambled!"
        else:
            assert self._game is not None
            self._game.restart()
            self._status_msg = ""

    # ── game state ──────────────────────────────────────────────────────────

    def _attach(self, game: GamePlay) -> None:
        if self._game is not None:
            self._game.unsubscribe(self._on_board_changed)
        self._game = game
        self._selected = Tile.SQUARE
        game.subscribe(self._on_board_changed)

    def _on_board_changed(self, board: Board) -> None:
        if board.is_goal() and not self._study_mode:
            self._screen = _Screen.WIN

    def _start_game(self) -> None:
        self._study_mode = False
        self._attach(GamePlay())
        self._status_msg = ""
        self._restart_btn.text = "RESTART (R)"
        self._screen = _Screen.PLAYING

    def _open_study(self) -> None:
        """Enter study mode — starts from the solved board."""
        self._study_mode = True
        self._attach(GamePlay.from_board(GameGenerator.solved()))
        self._status_msg = ""
        self._restart_btn.text = "SCRAMBLE (R)"
        self._screen = _Screen.PLAYING

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.WIN: self._ev_win,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.WIN: self._draw_win,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: SolverConfig = DEFAULT_CONFIG) -> None:
    """Launch the Pygame GUI (opens directly to the menu)."""
    app = PygameApp(config)
    app.run_loop()
