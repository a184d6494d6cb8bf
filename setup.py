import setuptools

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='questpal',
    version='0.1.0',
    description='Decoder for palette sections of versioned quest files.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_namespace_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'deal',
        'numpy',
        'Pillow',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['questpal=questpal.runner:app'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Topic :: Games/Entertainment',
        'Topic :: Utilities'
    ],
    python_requires='>=3.8',
    keywords='game resource palette quest zpl color cycle decode'
)
