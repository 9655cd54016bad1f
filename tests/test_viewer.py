# tests/test_viewer.py
import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

pygame = pytest.importorskip("pygame")

from gridpath.app.viewer import Viewer  # noqa: E402
from gridpath.core.maps import default_grid  # noqa: E402


@pytest.fixture
def viewer():
    v = Viewer(default_grid())
    yield v
    pygame.quit()


def test_stepping_to_the_goal_fills_overlays(viewer):
    for _ in range(200):
        viewer._do_step()
        if viewer.state == "Done":
            break
    assert viewer.state == "Done"
    assert len(viewer.path) == 16
    assert viewer.path[-1] == viewer.grid.goal
    assert viewer.grid.start in viewer.closed_set
    assert viewer._last_metrics["total_cost"] == 16
    viewer._draw()


def test_switch_algo_and_map_reset_state(viewer):
    viewer._do_step()
    viewer._switch_algo("dijkstra")
    assert viewer.algo.name == "Dijkstra"
    assert viewer.closed_set == set()
    assert viewer.btn_algo_d.active and not viewer.btn_algo_a.active

    viewer._switch_map("03_walled_off")
    assert viewer.selected_map_key == "03_walled_off"
    while not viewer.algo.status.terminal:
        viewer._do_step()
    assert viewer.state == "No path"
    assert viewer.path == []
    viewer._draw()


def test_run_toggle_ignored_after_finish(viewer):
    viewer._toggle_run()
    assert viewer.running and viewer.btn_run.active
    viewer._toggle_run()
    assert not viewer.running
    while not viewer.algo.status.terminal:
        viewer._do_step()
    viewer._toggle_run()
    assert not viewer.running


def test_quit_event_ends_loop(viewer):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    viewer.run()
    assert viewer.quit_requested


def test_left_click_on_button_fires_its_callback(viewer):
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1,
                                         pos=viewer.btn_algo_d.rect.center))
    viewer._handle_events()
    assert viewer.algo.name == "Dijkstra"
    assert viewer.btn_algo_d.active
