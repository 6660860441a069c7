"""
Aggregator tests.
"""

import itertools

from component_analytics.analysis import aggregate, aggregate_codebases, from_file, merge
from component_analytics.models import AggregateResult
from component_analytics.pipeline import analyze_file

FILES = [
    # internal + library
    "import { Button } from '@lib/ui'\nimport { Widget } from './Widget'\n<Widget><Button /></Widget>",
    # internal + library
    "import { Card } from '@lib/ui'\nimport { CloseIcon } from '@lib/icons'\nimport { Row } from '../Row'\n"
    "<Card><Row /><Row /><CloseIcon /></Card>",
    # internal only
    "import { Panel } from './Panel'\n<Panel><div><span>x</span></div></Panel>",
    # library only
    "import { Button } from '@lib/ui'\n<Button style={{ color: 'red' }} />",
]


def analyze_all(config):
    return [analyze_file(content, config, path=f"f{i}.tsx") for i, content in enumerate(FILES)]


class TestAggregate:

    def test_order_independent(self, config):
        results = analyze_all(config)
        expected = aggregate(results)
        for permutation in itertools.permutations(results):
            assert aggregate(permutation) == expected

    def test_merge_is_associative(self, config):
        a, b, c, d = (from_file(r) for r in analyze_all(config))
        assert merge(merge(a, b), merge(c, d)) == merge(a, merge(b, merge(c, d)))

    def test_empty_is_identity(self, config):
        single = from_file(analyze_all(config)[0])
        assert merge(AggregateResult(), single) == single
        assert merge(single, AggregateResult()) == single

    def test_merge_does_not_modify_inputs(self, config):
        a, b = (from_file(r) for r in analyze_all(config)[:2])
        before = from_file(analyze_all(config)[0])
        merge(a, b)
        assert a == before

    def test_counts(self, config):
        total = aggregate(analyze_all(config))
        assert total.file_count == 4
        assert total.library('lib').components == {'Button': 2, 'Card': 1}
        assert total.library('icons').components == {'CloseIcon': 1}
        assert total.internal.components == {'Widget': 1, 'Row': 2, 'Panel': 1}
        assert total.native_html.components == {'div': 1, 'span': 1}
        assert total.files_with_html == 1
        assert total.jsx_counts['Row'] == 2

    def test_tracked_is_sum_of_libraries(self, config):
        total = aggregate(analyze_all(config))
        assert total.tracked.total_instances == sum(t.total_instances for t in total.libraries.values())
        assert total.tracked.total_instances == 4
        assert total.total.total_instances == 4 + 4 + 2

    def test_unknown_library_is_empty(self):
        assert AggregateResult().library('missing').total_instances == 0


class TestInternalAdoption:
    """Files importing internal code, and how many of those also use a library."""

    def test_adoption_counts(self, config):
        total = aggregate(analyze_all(config))
        assert total.files_with_internal == 3
        assert total.files_with_internal_using_any_library == 2
        assert total.files_with_internal_using_library == {'lib': 2, 'icons': 1}

    def test_internal_instances(self, config):
        total = aggregate(analyze_all(config))
        assert total.total_internal_instances == 4
        assert total.internal_instances_using_library == 3


class TestCustomizationTallies:

    def test_inline_styles(self, config):
        total = aggregate(analyze_all(config))
        assert total.files_with_customizations == 1
        assert total.inline_styles.total == 1
        assert total.inline_styles.components == {'Button': 1}
        assert total.inline_styles.properties_by_component == {'Button': {'color': 1}}
        assert total.styled_usages.total == 0


class TestAggregateCodebases:

    def test_sums_codebases(self, config):
        results = analyze_all(config)
        per_codebase = {'web': aggregate(results[:2]), 'admin': aggregate(results[2:])}
        combined = aggregate_codebases(per_codebase)
        assert combined == aggregate(results)
        assert combined.file_count == 4


class TestMergeMethod:

    def test_same_as_function(self, config):
        a, b = (from_file(r) for r in analyze_all(config)[:2])
        assert a.merge(b) == merge(a, b)

    def test_onto_empty(self, config):
        a = from_file(analyze_all(config)[0])
        assert AggregateResult().merge(a) == a
