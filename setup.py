from setuptools import setup, find_packages

setup(
    name = 'xor_backprop',
    description = 'A 2-2-1 feed-forward network trained by backpropagation to learn XOR',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    zip_safe=False,
    version='0.1.0',
    python_requires='>=3.8',
    install_requires = ['numpy>=1.17'],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': [
            'xor_backprop = xor_backprop.main:main',
            ]
        }
)
