from setuptools import find_packages, setup


version = '0.1.0'


setup(
    name='crudr',
    version=version,
    description='CRUD routes and shortcuts for WebOb based applications',
    long_description=open('README').read() + '\n\n' + open('CHANGES').read(),
    license='BSD',
    packages=find_packages(exclude=['ez_setup', 'examples', 'tests']),
    python_requires='>=3.8',
    install_requires=[
        'WebOb >= 1.8',
        'colander >= 1.8',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'crudr-install = crudr.install:main',
        ],
    },
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
        'Topic :: Software Development :: Libraries',
    ],
    keywords='crud routes routing webob colander')
