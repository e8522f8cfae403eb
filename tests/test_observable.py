"""Tests for the observable list and its read-only view."""

from unittest.mock import Mock

import pytest

from patientbook.models.observable import ListChange, ObservableList, UnmodifiableObservableList


class TestObservableList:
    """Tests for change notifications."""

    @pytest.fixture
    def observed(self):
        """Create an observable list with a mock listener attached."""
        items = ObservableList(["a", "b"])
        listener = Mock()
        items.add_listener(listener)
        return items, listener

    def test_append_notifies(self, observed):
        """Test append emits an added change at the end."""
        items, listener = observed
        items.append("c")

        assert items == ["a", "b", "c"]
        listener.assert_called_once_with(ListChange("added", 2, added=("c",)))

    def test_setitem_notifies(self, observed):
        """Test item assignment emits a replaced change."""
        items, listener = observed
        items[-1] = "z"

        assert items == ["a", "z"]
        listener.assert_called_once_with(ListChange("replaced", 1, removed=("b",), added=("z",)))

    def test_remove_notifies(self, observed):
        """Test remove emits a removed change."""
        items, listener = observed
        items.remove("a")

        assert items == ["b"]
        listener.assert_called_once_with(ListChange("removed", 0, removed=("a",)))

    def test_set_all_notifies(self, observed):
        """Test set_all emits a single reset change."""
        items, listener = observed
        items.set_all(["x"])

        assert items == ["x"]
        listener.assert_called_once_with(ListChange("reset", 0, removed=("a", "b"), added=("x",)))

    def test_failed_mutation_does_not_notify(self, observed):
        """Test no change is emitted when a mutation fails."""
        items, listener = observed
        with pytest.raises(ValueError):
            items.remove("missing")
        with pytest.raises(IndexError):
            items[5] = "x"

        listener.assert_not_called()

    def test_remove_listener(self, observed):
        """Test removed listeners stop receiving changes."""
        items, listener = observed
        items.remove_listener(listener)
        items.remove_listener(listener)
        items.append("c")

        listener.assert_not_called()


class TestUnmodifiableObservableList:
    """Tests for the live read-only view."""

    def test_view_is_live(self):
        """Test the view reflects later mutations of its source."""
        source = ObservableList([1, 2])
        view = UnmodifiableObservableList(source)

        source.append(3)
        del source[0]

        assert list(view) == [2, 3]
        assert len(view) == 2
        assert view[0] == 2
        assert view[-1] == 3
        assert 3 in view
        assert view == [2, 3]

    def test_view_rejects_mutation(self):
        """Test the view cannot be mutated."""
        view = UnmodifiableObservableList(ObservableList([1, 2]))

        with pytest.raises(TypeError):
            view[0] = 5  # type: ignore[index]
        with pytest.raises(TypeError):
            del view[0]  # type: ignore[attr-defined]
        with pytest.raises(AttributeError):
            view.append(3)  # type: ignore[attr-defined]
        assert list(view) == [1, 2]

    def test_view_forwards_listeners(self):
        """Test listeners added through the view observe the source."""
        source = ObservableList([1])
        view = UnmodifiableObservableList(source)
        listener = Mock()
        view.add_listener(listener)

        source.append(2)
        view.remove_listener(listener)
        source.append(3)

        listener.assert_called_once_with(ListChange("added", 1, added=(2,)))


class TestListenerErrors:
    """Tests for listeners that raise."""

    def test_listener_error_propagates_after_mutation(self):
        """Test a failing listener surfaces to the caller and the change stays applied."""
        items = ObservableList([1])
        failing = Mock(side_effect=RuntimeError("listener failed"))
        later = Mock()
        items.add_listener(failing)
        items.add_listener(later)

        with pytest.raises(RuntimeError, match="listener failed"):
            items.append(2)

        assert items == [1, 2]
        failing.assert_called_once_with(ListChange("added", 1, added=(2,)))
        later.assert_not_called()
