from parabens.dao.json.short_link_json_dao import ShortLinkJsonDAO


__all__ = [
    'ShortLinkJsonDAO',
]
