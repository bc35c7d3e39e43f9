import setuptools

setuptools.setup(
    name = 'chartshape',
    version = '1.0',
    description = 'path geometry for charts: curves, arcs, pies and stacks',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires = '>=3.7',
    install_requires = ['numpy', 'scipy'],
    extras_require = {'test': ['pytest']},
)
