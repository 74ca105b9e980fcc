from ._version import __version__

from ._catlist import PCatList, pcatlist, cl, catlist_monoid
from ._algebra import Monoid, Applicative, monoid, applicative, \
	sum_monoid, product_monoid, str_monoid, tuple_monoid, \
	identity_applicative, optional_applicative, tuple_applicative

__all__ = ('PCatList', 'pcatlist', 'cl', 'catlist_monoid',
	'Monoid', 'Applicative', 'monoid', 'applicative',
	'sum_monoid', 'product_monoid', 'str_monoid', 'tuple_monoid',
	'identity_applicative', 'optional_applicative', 'tuple_applicative')
