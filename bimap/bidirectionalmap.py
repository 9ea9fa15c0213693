import logging

logger = logging.getLogger(__name__)

KEYS_FIRST = 'keys'
VALUES_FIRST = 'values'
PRECEDENCES = (KEYS_FIRST, VALUES_FIRST)


def create_map(initial=None, precedence=KEYS_FIRST):
    return BidirectionalMap(initial, precedence)


def _check_precedence(precedence):
    if precedence not in PRECEDENCES:
        raise ValueError('unknown precedence %r' % (precedence,))


def _check_str(name, obj):
    if not isinstance(obj, str):
        raise TypeError('%s must be a string, not %s' % (name, type(obj).__name__))


class BidirectionalMap(object):
    """A string to string table searchable by key or by value.

    The forward dict maps each key to its value.  The reverse dict maps
    each value to the keys currently bound to it, kept as a dict used as an
    insertion-ordered set, so that a value can be reached from several keys
    and the most recent one wins a by-value lookup.

    Lookups return None when nothing matches; an empty string is a real
    value.
    """

    def __init__(self, initial=None, precedence=KEYS_FIRST):
        _check_precedence(precedence)
        self.precedence = precedence
        self.forward = {}
        self.reverse = {}
        if initial is not None:
            items = initial.items() if hasattr(initial, 'items') else initial
            for key, value in items:
                self.insert(key, value)

    def __contains__(self, key):
        return key in self.forward

    def __len__(self):
        return len(self.forward)

    def __eq__(self, other):
        if not isinstance(other, BidirectionalMap):
            return NotImplemented
        return self.forward == other.forward

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.forward)

    def _unlink(self, key, value):
        keys = self.reverse[value]
        del keys[key]
        if not keys:
            del self.reverse[value]

    def insert(self, key, value):
        _check_str('key', key)
        _check_str('value', value)
        if key in self.forward:
            oldval = self.forward[key]
            if oldval != value:
                logger.debug('rebinding key %r from %r to %r',
                             key, oldval, value)
            # drop key from oldval's keys first so the reverse side never
            # points at a stale binding; a repeated pair moves to the end
            self._unlink(key, oldval)
        keys = self.reverse.setdefault(value, {})
        if keys:
            logger.debug('value %r now also bound from key %r', value, key)
        self.forward[key] = value
        keys[key] = None

    def remove(self, key):
        value = self.forward.pop(key)
        self._unlink(key, value)
        return value

    def find_by_key(self, key):
        return self.forward.get(key, None)

    def find_by_value(self, value):
        keys = self.reverse.get(value, None)
        if not keys:
            return None
        # most recently bound key
        return next(reversed(keys))

    def find_all_by_value(self, value):
        return list(self.reverse.get(value, ()))

    def find(self, s, precedence=None):
        """Look s up as a key and as a value.

        With KEYS_FIRST a key match wins over a value match; VALUES_FIRST
        reverses that.  precedence overrides the container's own setting
        for this call only.
        """
        if precedence is None:
            precedence = self.precedence
        else:
            _check_precedence(precedence)
        if precedence == KEYS_FIRST:
            lookups = (self.find_by_key, self.find_by_value)
        else:
            lookups = (self.find_by_value, self.find_by_key)
        for lookup in lookups:
            found = lookup(s)
            if found is not None:
                return found
        return None
