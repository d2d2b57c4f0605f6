"""
Default macro set, in the code form read by :func:`macro_engine.loader.parse_macros`.

Options: ``m`` math only, ``t`` text only, ``r`` trigger is a pattern,
``A`` auto-expand (always on in the trainer). Triggers written as
``/source/flags`` are compiled patterns.
"""

DEFAULT_MACROS_SOURCE = r"""
# Entering math
- {trigger: 'mk', replacement: '$$0$', options: 'tA'}
- {trigger: 'dm', replacement: "$$\n$0\n$$", options: 'tA'}

# Greek letters
- {trigger: ';a', replacement: '\alpha', options: 'mA'}
- {trigger: ';b', replacement: '\beta', options: 'mA'}
- {trigger: ';g', replacement: '\gamma', options: 'mA'}
- {trigger: ';G', replacement: '\Gamma', options: 'mA'}
- {trigger: ';d', replacement: '\delta', options: 'mA'}
- {trigger: ';D', replacement: '\Delta', options: 'mA'}
- {trigger: ';e', replacement: '\epsilon', options: 'mA'}
- {trigger: ';t', replacement: '\theta', options: 'mA'}
- {trigger: ';l', replacement: '\lambda', options: 'mA'}
- {trigger: ';m', replacement: '\mu', options: 'mA'}
- {trigger: ';p', replacement: '\pi', options: 'mA'}
- {trigger: ';s', replacement: '\sigma', options: 'mA'}
- {trigger: ';S', replacement: '\Sigma', options: 'mA'}
- {trigger: ';f', replacement: '\phi', options: 'mA'}
- {trigger: ';o', replacement: '\omega', options: 'mA'}
- {trigger: ';O', replacement: '\Omega', options: 'mA'}

# Structures
- {trigger: '//', replacement: '\frac{$1}{$2}$0', options: 'mA'}
- {trigger: 'sq', replacement: '\sqrt{$1}$0', options: 'mA'}
- {trigger: 'sr', replacement: '^{2}', options: 'mA'}
- {trigger: 'cb', replacement: '^{3}', options: 'mA'}
- {trigger: 'td', replacement: '^{$1}$0', options: 'mA'}
- {trigger: '__', replacement: '_{$1}$0', options: 'mA'}
- {trigger: 'sum', replacement: '\sum_{${1:i=1}}^{${2:n}} $0', options: 'mA'}
- {trigger: 'prod', replacement: '\prod_{${1:i=1}}^{${2:n}} $0', options: 'mA'}
- {trigger: 'int', replacement: '\int_{$1}^{$2} $3 \,d${4:x}$0', options: 'mA'}
- {trigger: 'lim', replacement: '\lim_{${1:n} \to ${2:\infty}} $0', options: 'mA'}
- {trigger: 'pmat', replacement: '\begin{pmatrix} $1 \end{pmatrix}$0', options: 'mA'}
- {trigger: 'bmat', replacement: '\begin{bmatrix} $1 \end{bmatrix}$0', options: 'mA'}
- {trigger: 'case', replacement: '\begin{cases} $1 \end{cases}$0', options: 'mA'}
- {trigger: 'abs', replacement: '\left| $1 \right|$0', options: 'mA'}
- {trigger: 'lr(', replacement: '\left( $1 \right)$0', options: 'mA'}
- {trigger: 'set', replacement: '\{ $1 \\\}$0', options: 'mA'}

# Operators and symbols
- {trigger: '->', replacement: '\to', options: 'mA'}
- {trigger: '<=', replacement: '\leq', options: 'mA'}
- {trigger: '>=', replacement: '\geq', options: 'mA'}
- {trigger: '!=', replacement: '\neq', options: 'mA'}
- {trigger: 'xx', replacement: '\times', options: 'mA'}
- {trigger: '**', replacement: '\cdot', options: 'mA'}
- {trigger: 'ooo', replacement: '\infty', options: 'mA'}
- {trigger: 'inn', replacement: '\in', options: 'mA'}
- {trigger: 'EE', replacement: '\exists', options: 'mA'}
- {trigger: 'AA', replacement: '\forall', options: 'mA'}

# Patterns
- {trigger: '([A-Za-z])(\d)', replacement: '[[0]]_{[[1]]}', options: 'rmA', priority: -1}
- {trigger: '/([A-Za-z])(hat|bar|vec)/', replacement: '\[[1]]{[[0]]}', options: 'mA'}

# Visual (applied to a selection, never typed)
- {trigger: 'U', replacement: '\underbrace{${VISUAL}}_{$1}$0', options: 'mA'}
- {trigger: 'B', replacement: '\boxed{${VISUAL}}', options: 'mA'}
"""
