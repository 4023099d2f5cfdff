from setuptools import setup
import os.path

setup(
    name='mailchimp',
    version='1.0.0',
    author='mailchimp-python contributors',
    description='A CLI client and Python API library for the MailChimp, MailChimp Export, STS and Partner APIs and Mandrill, with MailChimp OAuth2 support.',
    long_description=open(os.path.join(os.path.dirname(__file__), 'README')).read(),
    license='MIT',
    keywords='mailchimp mandrill email newsletter api oauth',
    scripts=['scripts/mailchimp'],
    packages=['mailchimp'],
    install_requires=['requests >= 2.0', 'docopt >= 0.6.2'],
    extras_require={'test': ['pytest']},
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Email'
    ]
)
