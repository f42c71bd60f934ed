import os
import argparse

from mcboost.report.reporter import plot_data, report_results


def main(argv=None):
    argparser = argparse.ArgumentParser(
                description='Shows the plots for given mcboost summary file ')

    argparser.add_argument('filepaths',
                           metavar='fp',
                           type=str,
                           nargs='+',
                           help='Path to the summary file')
    argparser.add_argument('--report_only', '-ro',
                           type=str,
                           default='n',
                           help='y : report only n : show plots(default)')

    args = argparser.parse_args(argv)
    for filepath in args.filepaths:
        filepath = os.path.realpath(filepath)
        if args.report_only == 'y':
            report_results(filename = filepath)
        else:
            plot_data(filename = filepath, only_save = False)


if __name__ == '__main__':
    main()
