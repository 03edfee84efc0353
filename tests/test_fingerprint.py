"""
Unit tests for sspmapper.tree.fingerprint.
"""

import re

from sspmapper.tree import (
    components,
    find_element_index,
    find_xpath,
    find_xpath_without_index,
    parse_document,
    resolve_xpath,
)


ITEMS_XML = """<root>
    <item>First</item>
    <other/>
    <item>Second</item>
    <item>Third</item>
</root>"""

NESTED_XML = """<root xmlns="http://csrc.nist.gov/ns/oscal/1.0">
    <child>
        <grandchild>Value</grandchild>
    </child>
    <child>
        <grandchild>One</grandchild>
        <grandchild>Two</grandchild>
    </child>
</root>"""


MIXED_NS_XML = """<root xmlns="http://csrc.nist.gov/ns/oscal/1.0" xmlns:x="urn:other">
    <x:prop/>
    <prop/>
</root>"""


class TestFindElementIndex:

    def test_same_tag_siblings_are_one_based(self):
        root = parse_document(ITEMS_XML)
        items = list(root.iter_children("item"))
        assert [find_element_index(item) for item in items] == [1, 2, 3]

    def test_other_tags_not_counted(self):
        root = parse_document(ITEMS_XML)
        assert find_element_index(root.find_child("other")) == 1

    def test_root_is_one(self):
        root = parse_document(ITEMS_XML)
        assert find_element_index(root) == 1

    def test_siblings_from_other_namespaces_share_the_count(self):
        root = parse_document(MIXED_NS_XML)
        foreign, local = root.children
        assert foreign.namespace == "urn:other"
        assert [find_element_index(foreign), find_element_index(local)] == [1, 2]


class TestFindXPath:

    def test_contains_every_ancestor_in_order(self):
        root = parse_document(NESTED_XML)
        grandchild = root.find_first("grandchild")
        xpath = find_xpath(grandchild)
        assert xpath == "/root[1]/child[1]/grandchild[1]"

    def test_indices_relative_to_same_tag_siblings(self):
        root = parse_document(NESTED_XML)
        second_child = list(root.iter_children("child"))[1]
        last = list(second_child.iter_children("grandchild"))[1]
        assert find_xpath(last) == "/root[1]/child[2]/grandchild[2]"

    def test_without_index_equals_indexed_path_stripped(self):
        root = parse_document(NESTED_XML)
        for node in root.iter_descendants():
            assert find_xpath_without_index(node) == re.sub(r"\[\d+\]", "", find_xpath(node))

    def test_without_index_has_no_brackets(self):
        root = parse_document(NESTED_XML)
        xpath = find_xpath_without_index(root.find_first("grandchild"))
        assert "[" not in xpath
        assert "]" not in xpath
        assert xpath == "/root/child/grandchild"

    def test_stable_across_reparse(self, sample_ssp_content):
        first = parse_document(sample_ssp_content)
        second = parse_document(sample_ssp_content)
        paths_first = [find_xpath(node) for node in first.iter_descendants()]
        paths_second = [find_xpath(node) for node in second.iter_descendants()]
        assert paths_first == paths_second


class TestComponents:

    def test_empty_path(self):
        assert components("") == []

    def test_splits_in_order(self):
        assert components("/root/child/grandchild") == ["root", "child", "grandchild"]

    def test_indexed_segments_kept_whole(self):
        assert components("/root[1]/child[2]") == ["root[1]", "child[2]"]

    def test_drops_empty_segments(self):
        assert components("//a///b/") == ["a", "b"]


class TestResolveXPath:

    def test_round_trip_for_every_node(self, sample_ssp_root):
        for node in sample_ssp_root.iter_descendants():
            assert resolve_xpath(sample_ssp_root, find_xpath(node)) is node

    def test_mixed_namespace_siblings_resolve_to_themselves(self):
        root = parse_document(MIXED_NS_XML)
        paths = [find_xpath(node) for node in root.children]
        assert paths == ["/root[1]/prop[1]", "/root[1]/prop[2]"]
        for node, xpath in zip(root.children, paths):
            assert resolve_xpath(root, xpath) is node

    def test_unindexed_segment_takes_first(self):
        root = parse_document(ITEMS_XML)
        assert resolve_xpath(root, "/root/item").inner_text == "First"

    def test_missing_node(self):
        root = parse_document(ITEMS_XML)
        assert resolve_xpath(root, "/root[1]/item[9]") is None
        assert resolve_xpath(root, "/other[1]") is None
        assert resolve_xpath(root, "") is None
