import codecs
import os
import setuptools


here = os.path.abspath(os.path.dirname(__file__))
readme = codecs.open(os.path.join(here, 'README.rst'), encoding='utf-8').read()

install_requires = [
    # Order, CertificateRequest and Revocation carry cryptography
    # objects (no more pyOpenSSL wrappers) since acme 3 / josepy 2.
    'acme>=3.0.0',
    'cryptography',
    'josepy>=2.0.0',
    'pyOpenSSL',
    'pytz',
    'requests',
]

tests_require = [
    'pycodestyle',
    'pylint',
    'pytest',
]

setuptools.setup(
    name='le-order',
    version='0.1.0',
    author='Ian Denhardt',
    author_email='ian@zenhack.net',
    description="Let's Encrypt order lifecycle client",
    long_description=readme,
    license='GPLv3',
    url='https://github.com/zenhack/simp_le',
    py_modules=['le_order'],
    python_requires='>=3.8',
    install_requires=install_requires,
    extras_require={
        'tests': tests_require,
    },
    entry_points={
        'console_scripts': [
            'le_order = le_order:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Security',
        'Topic :: System :: Installation/Setup',
        'Topic :: System :: Networking',
        'Topic :: System :: Systems Administration',
        'Topic :: Utilities',
    ],
)
