from __future__ import annotations

import pytest

from fastapi_paginglinks import PageNumberPagination, PageNumberState, PagingLink

URL = 'https://www.example.com/foo?bar+baz%3Aqux&page=3'


def test_defaults():
    pagination = PageNumberPagination()
    assert pagination.page_param == 'page'
    assert pagination.parse('https://www.example.com/foo') == PageNumberState(page=1)


@pytest.mark.parametrize(('url', 'expected_page'), [
    (URL, 3),
    ('https://www.example.com/foo?page=2', 2),
    ('https://www.example.com/foo', 1),
    ('https://www.example.com/foo?page=', 1),
    ('https://www.example.com/foo?page=abc', 1),
    ('https://www.example.com/foo?page=0', 1),
    ('https://www.example.com/foo?page=-4', 1),
    ('https://www.example.com/foo?page=99999999999999999999', 1),
    ('https://www.example.com/foo?page=' + '9' * 5000, 1),
])
def test_parse(url: str, expected_page: int):
    assert PageNumberPagination().parse(url) == PageNumberState(page=expected_page)


def test_parse_is_idempotent():
    pagination = PageNumberPagination()
    assert pagination.parse(URL) == pagination.parse(URL)


def test_links_page_3():
    """ page=3: first, prev and next; bare parameters normalized """
    pagination = PageNumberPagination()

    assert pagination.first_link(URL) == PagingLink('first', 'https://www.example.com/foo?bar+baz%3Aqux=&page=1')
    assert pagination.prev_link(URL) == PagingLink('prev', 'https://www.example.com/foo?bar+baz%3Aqux=&page=2')
    assert pagination.next_link(URL) == PagingLink('next', 'https://www.example.com/foo?bar+baz%3Aqux=&page=4')
    assert pagination.last_link(URL) is None

    assert pagination.links(URL) == [
        PagingLink('first', 'https://www.example.com/foo?bar+baz%3Aqux=&page=1'),
        PagingLink('prev', 'https://www.example.com/foo?bar+baz%3Aqux=&page=2'),
        PagingLink('next', 'https://www.example.com/foo?bar+baz%3Aqux=&page=4'),
    ]


def test_links_without_page():
    """ No page parameter: page 1, no prev link """
    pagination = PageNumberPagination()
    url = 'https://www.example.com/foo'

    assert pagination.prev_link(url) is None
    assert pagination.next_link(url) == PagingLink('next', 'https://www.example.com/foo?page=2')
    assert str(pagination.links(url)) == (
        '<https://www.example.com/foo?page=1>; rel="first",'
        '<https://www.example.com/foo?page=2>; rel="next"'
    )


@pytest.mark.parametrize('page', [1, 2, 3, 10, 999])
def test_neighbours(page: int):
    pagination = PageNumberPagination()
    url = f'https://x.test/items?page={page}'

    first = pagination.first_link(url)
    assert pagination.parse(first.url).page == 1

    next = pagination.next_link(url)
    assert pagination.parse(next.url).page == page + 1

    prev = pagination.prev_link(url)
    if page == 1:
        assert prev is None
    else:
        assert pagination.parse(prev.url).page == page - 1


def test_explicit_state_matches_auto_parse():
    pagination = PageNumberPagination()
    state = pagination.parse(URL)

    assert pagination.first_link(URL, state) == pagination.first_link(URL)
    assert pagination.prev_link(URL, state) == pagination.prev_link(URL)
    assert pagination.next_link(URL, state) == pagination.next_link(URL)
    assert pagination.links(URL, state) == pagination.links(URL)


def test_explicit_state_wins_over_url():
    pagination = PageNumberPagination()
    link = pagination.next_link('https://x.test/items?page=3', PageNumberState(page=7))
    assert link == PagingLink('next', 'https://x.test/items?page=8')


def test_custom_param_name():
    pagination = PageNumberPagination(page_param='p')
    url = 'https://x.test/items?p=2&page=10'

    assert pagination.parse(url).page == 2
    assert pagination.next_link(url).url == 'https://x.test/items?p=3&page=10'


def test_shared_instance_keeps_no_state():
    pagination = PageNumberPagination()

    assert pagination.prev_link('https://x.test/a?page=5').url == 'https://x.test/a?page=4'
    assert pagination.prev_link('https://x.test/b') is None
    assert pagination.prev_link('https://x.test/a?page=5').url == 'https://x.test/a?page=4'


def test_accepts_starlette_url():
    from starlette.datastructures import URL as StarletteURL

    pagination = PageNumberPagination()
    url = StarletteURL('http://testserver/items?page=2')
    assert pagination.prev_link(url).url == 'http://testserver/items?page=1'


def test_links_keep_undecodable_values():
    pagination = PageNumberPagination()
    url = 'https://x.test/items?q=%FF&page=2'

    assert pagination.first_link(url).url == 'https://x.test/items?page=1&q=%FF'
    assert pagination.prev_link(url).url == 'https://x.test/items?page=1&q=%FF'
