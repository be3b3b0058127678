# tests/commands/test_query_commands.py
"""Tests for the search, sample, stats and info commands."""

import pytest

from qbank.commands import info, sample, search, stats
from qbank.config import get_repository


@pytest.fixture
def loaded_dir(temp_dir, varied_questions):
    """Data directory with the varied collection saved for tenant acme."""
    get_repository(tenant_id="acme", data_dir=temp_dir).save_questions(varied_questions)
    return temp_dir


class TestSearchCommand:
    def test_empty_database(self, temp_dir):
        result = search.search(data_dir=temp_dir)
        assert result.success is True
        assert result.questions == []
        assert result.total_count == 0

    def test_filters_and_query(self, loaded_dir):
        result = search.search(
            {"paperType": ["GS-I"]}, search_query="monsoon", tenant_id="acme", data_dir=loaded_dir
        )
        assert result.success is True
        assert [q.id for q in result.questions] == ["g1"]
        assert result.search_query == "monsoon"

    def test_sort_and_page(self, loaded_dir):
        result = search.search(
            sort_by="marks",
            sort_order="desc",
            limit=2,
            offset=0,
            tenant_id="acme",
            data_dir=loaded_dir,
        )
        assert [q.id for q in result.questions] == ["s1", "g1"]
        assert result.total_count == 5
        assert result.limit == 2

    def test_invalid_filter_is_error(self, loaded_dir):
        result = search.search({"difficulty": ["Brutal"]}, tenant_id="acme", data_dir=loaded_dir)
        assert result.success is False
        assert "Invalid filter" in result.error

    def test_tenants_do_not_see_each_other(self, loaded_dir):
        result = search.search(tenant_id="globex", data_dir=loaded_dir)
        assert result.total_count == 0


class TestSampleCommand:
    def test_draws_requested_count(self, loaded_dir):
        result = sample.sample(3, tenant_id="acme", data_dir=loaded_dir)
        assert result.success is True
        assert result.requested == 3
        assert len({q.id for q in result.questions}) == 3

    def test_default_count(self, loaded_dir):
        result = sample.sample(tenant_id="acme", data_dir=loaded_dir)
        assert result.requested == 10
        assert len(result.questions) == 5

    def test_filtered(self, loaded_dir):
        result = sample.sample(5, {"year": [2024]}, tenant_id="acme", data_dir=loaded_dir)
        assert sorted(q.id for q in result.questions) == ["e1", "s1"]

    def test_invalid_filter_is_error(self, loaded_dir):
        result = sample.sample(5, {"year": ["recent"]}, tenant_id="acme", data_dir=loaded_dir)
        assert result.success is False


class TestStatsCommand:
    def test_no_data(self, temp_dir):
        result = stats.stats(data_dir=temp_dir)
        assert result.success is True
        assert result.stats is None

    def test_stats(self, loaded_dir):
        result = stats.stats(tenant_id="acme", data_dir=loaded_dir)
        assert result.stats.total_questions == 5
        assert result.stats.by_year == {2022: 1, 2023: 2, 2024: 2}


class TestInfoCommand:
    def test_info(self, loaded_dir):
        result = info.info(tenant_id="acme", data_dir=loaded_dir)
        assert result.success is True
        assert result.tenant_id == "acme"
        assert result.data_dir == loaded_dir
        assert result.questions_count == 5
        assert result.papers_count == 0
        assert result.storage_size > 0

    def test_info_invalid_tenant(self, temp_dir):
        result = info.info(tenant_id="a/b", data_dir=temp_dir)
        assert result.success is False
