import sys
import logging

from bimap.bidirectionalmap import create_map

logger = logging.getLogger(__name__)

DATA = {
    'one': '1',
    'two': '2',
    'three': '3',
}


def show(found):
    # a miss prints as a blank line
    print('' if found is None else found)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if '--verbose' in argv:
        logging.basicConfig(level=logging.DEBUG)

    bm = create_map(DATA)
    bm.insert('four', '4')
    bm.insert('five', '5')
    logger.debug('demo map: %r', bm)

    show(bm.find_by_key('one'))
    show(bm.find_by_key('ten'))

    show(bm.find_by_value('1'))
    show(bm.find_by_value('10'))

    show(bm.find('five'))
    show(bm.find('5'))
    show(bm.find('twenty'))
    show(bm.find('20'))
    return 0


if __name__ == '__main__':
    sys.exit(main())
