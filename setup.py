"""
1. pip3 install setuptools
2. python3 setup.py build
3. sudo python3 setup.py install
"""

from setuptools import setup,find_packages
setup(
    name='segwitTxUtils',
    version='0.1.0',
    install_requires=['base58>=2.0','ecdsa>=0.18','docopt==0.6.2','bech32>=1.2','pycryptodome>=3.9'],
    extras_require={'test': ['pytest>=7.0']},
    python_requires='>=3.6.7',
    packages=find_packages(exclude=['tests']),
    py_modules=['TxUtils'],
    entry_points={'console_scripts': ['txutils=TxUtils:main']}
  )
