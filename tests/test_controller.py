"""
Unit tests for PaginationController
"""
import logging
import threading
from unittest.mock import MagicMock

import pytest

from LogPager.pagination import PaginationController, describe_model


@pytest.fixture
def controller():
    return PaginationController()


@pytest.fixture
def page_spy(controller):
    spy = MagicMock()
    controller.on_page_changed(spy)
    return spy


@pytest.fixture
def model_spy(controller):
    spy = MagicMock()
    controller.on_model_changed(spy)
    return spy


class TestState:
    """Defaults and set_pagination"""
    
    def test_defaults(self, controller):
        """Test controller starts on page 1 of 1"""
        assert controller.current_page == 1
        assert controller.total_pages == 1
        assert controller.max_buttons == 7
        assert controller.items_per_page == 25
        assert describe_model(controller.display_model) == "[1]"
    
    def test_set_pagination_sets_values(self, controller):
        """Test set_pagination stores clamped values"""
        controller.set_pagination(2, 5)
        assert (controller.current_page, controller.total_pages) == (2, 5)
        
        controller.set_pagination(0, 0)
        assert (controller.current_page, controller.total_pages) == (1, 1)
        
        controller.set_pagination(10, 3)
        assert (controller.current_page, controller.total_pages) == (3, 3)
    
    def test_set_pagination_is_idempotent(self, controller, model_spy):
        """Test repeating set_pagination rebuilds once"""
        assert controller.set_pagination(2, 5)
        assert not controller.set_pagination(2, 5)
        assert model_spy.call_count == 1
    
    def test_clamped_duplicate_is_a_noop(self, controller, model_spy):
        """Test values clamping to the stored state are ignored"""
        controller.set_pagination(3, 3)
        model_spy.reset_mock()
        assert not controller.set_pagination(9, 3)
        model_spy.assert_not_called()
    
    def test_set_pagination_does_not_report_page_change(self, controller, page_spy):
        """Test data-source updates are not reported as navigation"""
        controller.set_pagination(4, 10)
        page_spy.assert_not_called()
    
    def test_model_listener_receives_state_and_model(self, controller, model_spy):
        """Test model listeners get the state and its model"""
        controller.set_pagination(10, 20)
        state, model = model_spy.call_args[0]
        assert state.current_page == 10
        assert state.total_pages == 20
        assert describe_model(model) == "1 ... 9 [10] 11 ... 20"
        assert model == controller.display_model
    
    def test_set_max_buttons(self, controller, model_spy):
        """Test the button budget is floored and applied"""
        assert controller.set_max_buttons(2)
        assert controller.max_buttons == 3
        assert not controller.set_max_buttons(3)
        assert not controller.set_max_buttons(1)
        assert model_spy.call_count == 1
        
        controller.set_max_buttons(10)
        controller.set_pagination(1, 10)
        assert controller.current_page == 1
        assert describe_model(controller.display_model) == "[1] 2 3 4 5 6 7 8 9 10"


class TestNavigation:
    """next/prev/first/last/select_page/jump_to"""
    
    def test_next_and_prev(self, controller, page_spy):
        """Test next and prev move one page and report it"""
        controller.set_pagination(1, 3)
        
        assert controller.next()
        page_spy.assert_called_once_with(2)
        
        page_spy.reset_mock()
        assert controller.prev()
        page_spy.assert_called_once_with(1)
    
    def test_bounds_are_not_wrapped(self, controller, page_spy):
        """Test navigation stops at the first and last page"""
        controller.set_pagination(1, 3)
        assert not controller.prev()
        
        controller.set_pagination(3, 3)
        assert not controller.next()
        page_spy.assert_not_called()
        assert controller.current_page == 3
    
    def test_page_changed_only_on_change(self, controller, page_spy):
        """Test page changes are reported only when the page moves"""
        controller.set_pagination(2, 5)
        controller.next()
        controller.next()
        assert [c.args[0] for c in page_spy.call_args_list] == [3, 4]
        
        controller.set_pagination(5, 5)
        controller.next()
        assert page_spy.call_count == 2
    
    def test_navigation_rebuilds_model_before_reporting(self, controller):
        """Test the model is current when page listeners run"""
        controller.set_pagination(1, 20)
        seen = []
        controller.on_page_changed(
            lambda page: seen.append((page, describe_model(controller.display_model)))
        )
        controller.next()
        assert seen == [(2, "1 [2] 3 4 5 ... 20")]
    
    def test_first_and_last(self, controller, page_spy):
        """Test first and last jump to the boundary pages"""
        controller.set_pagination(5, 9)
        
        assert controller.last()
        assert controller.current_page == 9
        assert not controller.last()
        
        assert controller.first()
        assert controller.current_page == 1
        assert not controller.first()
        
        assert [c.args[0] for c in page_spy.call_args_list] == [9, 1]
    
    def test_select_page(self, controller, page_spy):
        """Test page button clicks ignore ellipses and the current page"""
        controller.set_pagination(1, 10)
        
        assert not controller.select_page(-1)
        assert not controller.select_page(None)
        assert not controller.select_page(1)
        page_spy.assert_not_called()
        
        assert controller.select_page(7)
        page_spy.assert_called_once_with(7)
    
    def test_jump_to(self, controller, page_spy):
        """Test jumping to a typed page"""
        controller.set_pagination(1, 5)
        assert controller.jump_to("3")
        page_spy.assert_called_once_with(3)
        assert controller.current_page == 3
    
    def test_jump_to_non_numeric_is_ignored(self, controller, page_spy, model_spy):
        """Test unparsable jump text leaves the state alone"""
        controller.set_pagination(2, 5)
        model_spy.reset_mock()
        
        for text in ("abc", "", "  ", "2.5", "1_0", "５", None):
            assert not controller.jump_to(text)
        
        assert controller.current_page == 2
        page_spy.assert_not_called()
        model_spy.assert_not_called()
    
    def test_jump_to_clamps_target(self, controller, page_spy):
        """Test jump targets are clamped into the page range"""
        controller.set_pagination(2, 5)
        
        assert controller.jump_to("999")
        page_spy.assert_called_once_with(5)
        
        page_spy.reset_mock()
        assert controller.jump_to("-1")
        page_spy.assert_called_once_with(1)
    
    def test_jump_to_current_page_is_noop(self, controller, page_spy):
        """Test jumping to the current page is ignored"""
        controller.set_pagination(5, 5)
        assert not controller.jump_to("5")
        assert not controller.jump_to(" 5 ")
        page_spy.assert_not_called()


class TestItemsPerPage:
    """Items-per-page selection"""
    
    def test_change_is_reported(self, controller):
        """Test a new items-per-page value is stored and reported"""
        spy = MagicMock()
        controller.on_items_per_page_changed(spy)
        
        controller.set_items_per_page(50)
        spy.assert_called_once_with(50)
        assert controller.items_per_page == 50
    
    def test_reselecting_current_value_is_reported(self, controller):
        """Test reselecting the active value is still reported"""
        spy = MagicMock()
        controller.on_items_per_page_changed(spy)
        
        controller.set_items_per_page(25)
        spy.assert_called_once_with(25)
    
    def test_select_by_index(self, controller):
        """Test selecting items per page by choice index"""
        controller.set_items_per_page_index(2)
        assert controller.items_per_page == 100
    
    def test_invalid_values_are_rejected(self, controller):
        """Test values outside the choices raise"""
        with pytest.raises(ValueError):
            controller.set_items_per_page(30)
        with pytest.raises(IndexError):
            controller.set_items_per_page_index(4)
        with pytest.raises(ValueError):
            PaginationController(items_per_page=10)
        assert controller.items_per_page == 25
    
    def test_page_state_is_untouched(self, controller, model_spy):
        """Test items per page does not rebuild the model"""
        controller.set_pagination(3, 8)
        model_spy.reset_mock()
        
        controller.set_items_per_page(200)
        assert (controller.current_page, controller.total_pages) == (3, 8)
        model_spy.assert_not_called()


class TestControlsAndSlots:
    """Navigation affordances and pooled button slots"""
    
    def test_navigation_controls(self, controller):
        """Test navigation affordances follow the page position"""
        controller.set_pagination(1, 3)
        controls = controller.controls
        assert not controls.first_enabled and not controls.prev_enabled
        assert controls.next_enabled and controls.last_enabled
        assert controls.jump_enabled
        
        controller.set_pagination(3, 3)
        controls = controller.controls
        assert controls.first_enabled and controls.prev_enabled
        assert not controls.next_enabled and not controls.last_enabled
        
        controller.set_pagination(1, 1)
        assert not any(controller.controls)
    
    def test_slots_follow_model(self, controller):
        """Test button slots mirror the display model"""
        controller.set_max_buttons(4)
        controller.set_pagination(1, 10)
        
        slots = controller.slots
        assert [slot.text for slot in slots] == ["1", "2", "...", "10"]
        assert slots[0].checked
        assert slots[2].page == -1
        assert not slots[2].enabled
        assert all(slot.enabled for slot in slots if slot.text != "...")
    
    def test_pool_is_reused(self, controller):
        """Test the slot pool keeps its size across updates"""
        controller.set_pagination(1, 10)
        pool_size = len(controller.slot_pool)
        
        controller.set_pagination(5, 10)
        assert len(controller.slot_pool) == pool_size
        assert len(controller.slots) == 7


class TestSubscriptions:
    """Listener management, logging and thread safety"""
    
    def test_unsubscribe(self, controller):
        """Test unsubscribed listeners are not called"""
        spy = MagicMock()
        unsubscribe = controller.on_page_changed(spy)
        controller.set_pagination(1, 5)
        
        unsubscribe()
        unsubscribe()
        controller.next()
        spy.assert_not_called()
    
    def test_recomputation_is_logged(self, controller, caplog):
        """Test recomputation is logged at debug level"""
        with caplog.at_level(logging.DEBUG, logger="LogPager.pagination.controller"):
            controller.set_pagination(2, 5)
        assert "update_pagination: current_page=2 total_pages=5" in caplog.text
    
    def test_recomputation_is_quiet_above_debug(self, controller, caplog):
        """Test no recomputation line is logged at info level"""
        with caplog.at_level(logging.INFO, logger="LogPager.pagination.controller"):
            controller.set_pagination(2, 5)
        assert "update_pagination" not in caplog.text


def test_concurrent_navigation_is_serialized():
    """Test concurrent navigation never loses a step"""
    controller = PaginationController()
    controller.set_pagination(1, 1000)
    
    def advance():
        for _ in range(100):
            controller.next()
    
    threads = [threading.Thread(target=advance) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    
    assert controller.current_page == 401
    current = [entry.page for entry in controller.display_model if entry.is_current]
    assert current == [401]
