"""create-hana -- scaffolds React, Vue, and Node starter projects.

The generation pass is pure and in-memory: a resolved ``Config`` goes in, a
``ProjectContext`` holding the file map and ``package.json`` model comes out.
Persisting that context is left to :mod:`hana.writer`.
"""

__version__ = "0.3.0"
