from setuptools import setup, find_packages

setup(
    name="vxtwiml",
    version="0.0.1a",
    url="https://github.com/praekelt/vxtwiml",
    license="BSD",
    description="Builds TwiML call and message handling documents",
    long_description=open("README.rst", "r").read(),
    author="Praekelt Foundation",
    author_email="dev@praekeltfoundation.org",
    packages=find_packages(),
    scripts=[],
    install_requires=[
        'twisted',
        'klein',
        'zope.interface',
    ],
    extras_require={
        'test': [
            'treq',
            'twilio',
        ],
    },
    entry_points={
        'console_scripts': [
            'vxtwiml = vxtwiml.service:main',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Communications :: Telephony',
    ],
)
